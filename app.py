"""
Daily Diet - personalized five-meal diet generator
- Inputs: name, age, sex, height (cm), weight (kg), goal, activity level, restrictions, favorite foods
- Output: BMR/TDEE/target calories, five meals with substitutions, shopping list, downloadable PDF

How to run:
1) Install once:
   python -m pip install -e .
2) Run server locally:
   python app.py

Render/Gunicorn command:
   gunicorn -w 1 -t 120 --graceful-timeout 20 --max-requests 200 --max-requests-jitter 25 -b 0.0.0.0:$PORT app:app

Offline (no web server), writes a PDF and/or JSON:
   python app.py --offline --name Ana --sex female --age 30 --height 165 --weight 70 \
       --goal lose-5kg --activity light --restrictions vegetarian --favorites tofu,banana --out ana.pdf
"""
import argparse
import json
import logging
import os
from typing import List, Optional

from dietplanner.config import Config
from dietplanner.errors import ProfileError
from dietplanner.models import ACTIVITY_LEVELS, GOALS, SEXES, RestrictionFlags
from dietplanner.services.export import plan_snapshot, render_pdf
from dietplanner.services.forms import parse_profile
from dietplanner.services.planner import generate_diet
from dietplanner.services.shopping import build_shopping_list
from dietplanner.web.app import create_app

logger = logging.getLogger("dietplanner")

app = create_app()


def offline_emit(args: argparse.Namespace) -> int:
    form = {
        "name": args.name, "age": args.age, "sex": args.sex,
        "height": args.height, "weight": args.weight,
        "goal": args.goal, "activity_level": args.activity,
        "restrictions": args.restrictions or "", "favorites": args.favorites or "",
    }
    try:
        profile = parse_profile(form)
    except ProfileError as e:
        logger.error("invalid profile: %s", e)
        return 2
    plan = generate_diet(profile)
    shopping = build_shopping_list(plan, RestrictionFlags.from_restrictions(profile.restrictions))

    if args.out:
        with open(args.out, "wb") as f:
            f.write(render_pdf(profile, plan, shopping, app_name=Config.APP_NAME))
        logger.info("Wrote PDF: %s", args.out)
    if args.out_json:
        body = plan_snapshot(profile, plan)
        body["shoppingList"] = shopping
        with open(args.out_json, "w", encoding="utf-8") as f:
            json.dump(body, f, indent=2, ensure_ascii=False)
        logger.info("Wrote JSON: %s", args.out_json)
    if not args.out and not args.out_json:
        print(json.dumps(plan.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Daily Diet")
    parser.add_argument("--offline", action="store_true", help="Generate a plan without a web server")
    parser.add_argument("--name", type=str, default="Guest")
    parser.add_argument("--sex", type=str, default="male", choices=list(SEXES))
    parser.add_argument("--age", type=int, default=30)
    parser.add_argument("--height", type=float, default=175.0, help="cm")
    parser.add_argument("--weight", type=float, default=80.0, help="kg")
    parser.add_argument("--goal", type=str, default="lose-5kg", choices=list(GOALS))
    parser.add_argument("--activity", type=str, default="sedentary", choices=list(ACTIVITY_LEVELS))
    parser.add_argument("--restrictions", type=str, default=None, help="Comma-separated, e.g. vegetarian,gluten-free")
    parser.add_argument("--favorites", type=str, default=None, help="Comma-separated food ids, e.g. tofu,banana")
    parser.add_argument("--out", type=str, default=None, help="Output PDF path")
    parser.add_argument("--out_json", type=str, default=None, help="Output JSON path")
    args = parser.parse_args(argv)

    if args.offline:
        return offline_emit(args)

    port = int(os.environ.get("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
