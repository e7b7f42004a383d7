import datetime
import io
import logging
import secrets
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from flask import Blueprint, current_app, jsonify, make_response, redirect, render_template, request, send_file, url_for

from ..errors import ProfileError
from ..models import ACTIVITY_LEVELS, GOALS, RESTRICTIONS, DietPlan, RestrictionFlags, UserProfile
from ..services.catalog import SUBSTITUTION_GUIDE, Category, foods_in
from ..services.export import pdf_filename, plan_snapshot, render_pdf
from ..services.forms import parse_profile
from ..services.planner import generate_diet
from ..services.shopping import build_shopping_list

logger = logging.getLogger(__name__)

bp = Blueprint("web", __name__, template_folder="../templates")

GOAL_LABELS = {"lose-fast": "Lose weight fast", "reduce-belly": "Reduce belly fat",
               "lose-5kg": "Lose 5kg", "maintain": "Maintain weight"}
ACTIVITY_LABELS = {"sedentary": "Sedentary - little or no exercise",
                   "light": "Light - exercise 1-3 days a week",
                   "moderate": "Moderate - exercise 3-5 days a week",
                   "intense": "Intense - exercise 6-7 days a week"}
RESTRICTION_LABELS = {"none": "No restrictions", "lactose-free": "Lactose-free", "gluten-free": "Gluten-free",
                      "vegetarian": "Vegetarian", "no-sweets": "I don't like sweets"}
FAVORITE_SECTIONS = [("Proteins", Category.PROTEIN), ("Carbohydrates", Category.CARB),
                     ("Vegetables", Category.VEGETABLE), ("Fruits", Category.FRUIT),
                     ("Sweets", Category.SWEET)]


@dataclass
class Result:
    token: str
    profile: UserProfile
    plan: DietPlan
    shopping: Dict[str, List[str]]


_RESULTS: "OrderedDict[str, Result]" = OrderedDict()


def _remember(result: Result) -> None:
    _RESULTS[result.token] = result
    limit = current_app.config.get("RESULT_CACHE_SIZE", 500)
    while len(_RESULTS) > limit:
        _RESULTS.popitem(last=False)


def _render(result: Optional[Result] = None, error: Optional[str] = None, status: int = 200):
    html = render_template("index.html",
        app_name=current_app.config.get("APP_NAME", "Daily Diet"),
        goals=[(g, GOAL_LABELS[g]) for g in GOALS],
        activities=[(a, ACTIVITY_LABELS[a]) for a in ACTIVITY_LEVELS],
        restrictions=[(r, RESTRICTION_LABELS[r]) for r in ("none",) + RESTRICTIONS],
        favorite_sections=[(label, foods_in(cat)) for label, cat in FAVORITE_SECTIONS],
        guide=SUBSTITUTION_GUIDE,
        form=request.form,
        result=result, error=error,
        year=datetime.datetime.now().year)
    return make_response(html, status)


@bp.after_app_request
def add_csp(resp):
    domain = current_app.config.get("ALLOWED_EMBED_DOMAIN")
    if domain:
        resp.headers['Content-Security-Policy'] = f"frame-ancestors {domain} 'self'"
    return resp


@bp.get("/")
def index():
    return _render()


@bp.route("/generate", methods=["GET", "POST"])
def generate():
    if request.method == "GET":
        return redirect(url_for("web.index"), code=302)
    try:
        profile = parse_profile(request.form)
    except ProfileError as e:
        logger.info("rejected profile: %s", e)
        return _render(error=str(e), status=400)

    plan = generate_diet(profile)
    shopping = build_shopping_list(plan, RestrictionFlags.from_restrictions(profile.restrictions))
    token = secrets.token_hex(16)
    result = Result(token, profile, plan, shopping)
    _remember(result)
    logger.info("generated plan %s: %s kcal (%s)", token, plan.target_calories, plan.diet_focus)
    return _render(result=result)


def _lookup(token: str) -> Tuple[Optional[Result], Optional[object]]:
    result = _RESULTS.get(token)
    if result is None:
        return None, make_response("Session expired. Please regenerate.", 410)
    return result, None


@bp.get("/pdf/<token>")
def pdf(token: str):
    result, expired = _lookup(token)
    if expired is not None:
        return expired
    data = render_pdf(result.profile, result.plan, result.shopping,
                      app_name=current_app.config.get("APP_NAME", "Daily Diet"))
    return send_file(io.BytesIO(data), as_attachment=True,
                     download_name=pdf_filename(result.profile), mimetype="application/pdf")


@bp.get("/plan/<token>.json")
def plan_json(token: str):
    result, expired = _lookup(token)
    if expired is not None:
        return expired
    body = plan_snapshot(result.profile, result.plan)
    body["shoppingList"] = result.shopping
    return jsonify(body)
