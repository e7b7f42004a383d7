import io
import re
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..models import DietPlan, UserProfile

BRAND = colors.Color(26/255, 122/255, 94/255)
WARNING = colors.Color(154/255, 52/255, 18/255)
DISCLAIMER = ("This diet is educational and does not replace follow-up "
              "with a professional nutritionist.")


def pdf_filename(profile: UserProfile) -> str:
    slug = re.sub(r"\s+", "-", profile.name.strip().lower()) or "plan"
    return f"diet-{slug}.pdf"


def plan_snapshot(profile: UserProfile, plan: DietPlan) -> Dict[str, Any]:
    """Profile fields plus the flattened plan, one row per saved diet."""
    out = {
        "name": profile.name,
        "age": profile.age,
        "sex": profile.sex,
        "height": profile.height,
        "weight": profile.weight,
        "goal": profile.goal,
        "activityLevel": profile.activity_level,
        "restrictions": sorted(profile.restrictions),
    }
    out.update(plan.to_dict())
    return out


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name='Small', fontSize=9, leading=11, textColor=colors.grey))
    styles.add(ParagraphStyle(name='Brand', parent=styles['Heading2'], textColor=BRAND))
    styles.add(ParagraphStyle(name='Warn', fontSize=10, leading=13, textColor=WARNING))
    return styles


def render_pdf(profile: UserProfile, plan: DietPlan, shopping: Dict[str, List[str]],
               app_name: str = "Daily Diet") -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title=f"{app_name} - {profile.name}")
    styles = _styles()
    story: List[Any] = []

    story.append(Paragraph("<font color='#1a7a5e'><b>Personalized Diet</b></font>", styles['Title']))
    story.append(Paragraph(f"Prepared for: {escape(profile.name)}", styles['Normal']))
    story.append(Spacer(1, 0.2*inch))

    story.append(Paragraph("<b>Plan Summary</b>", styles['Heading2']))
    summary = [
        f"Daily calories: {plan.target_calories} kcal",
        f"Meals per day: {plan.meals_per_day}",
        f"Diet focus: {escape(plan.diet_focus)}",
        f"Basal metabolic rate (BMR): {plan.bmr} kcal",
        f"Daily expenditure (TDEE): {plan.tdee} kcal",
        f"Calorie deficit: {plan.deficit} kcal",
    ]
    story.append(Paragraph("<br/>".join(f"• {s}" for s in summary), styles['Normal']))
    story.append(Spacer(1, 0.2*inch))

    story.append(Paragraph("Daily Meal Plan", styles['Brand']))
    for _, meal in plan.meals:
        title = f"<b>{escape(meal.name)}</b>" + (f" ({meal.time})" if meal.time else "")
        table_data = [["Food", "Portion", "Substitutions"]]
        for food in meal.foods:
            table_data.append([
                Paragraph(escape(food.item), styles['Normal']),
                food.portion,
                Paragraph(escape(", ".join(food.substitutes)), styles['Small']),
            ])
        t = Table(table_data, hAlign='LEFT', colWidths=[2.6*inch, 1.3*inch, 2.6*inch])
        t.setStyle(TableStyle([
            ('GRID', (0, 0), (-1, -1), 0.4, colors.grey),
            ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ]))
        story.append(KeepTogether([Paragraph(title, styles['Heading3']), t]))
        story.append(Spacer(1, 0.15*inch))

    story.append(Paragraph("Shopping List", styles['Brand']))
    for section, items in shopping.items():
        story.append(Paragraph(f"<b>{escape(section)}</b>", styles['Normal']))
        story.append(Paragraph("<br/>".join(f"• {escape(i)}" for i in items), styles['Small']))
        story.append(Spacer(1, 0.1*inch))

    story.append(Spacer(1, 0.2*inch))
    story.append(Paragraph("<b>Important notice</b>", styles['Warn']))
    story.append(Paragraph(DISCLAIMER, styles['Warn']))

    doc.build(story)
    return buf.getvalue()
