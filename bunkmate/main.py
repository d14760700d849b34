# ABOUTME: Main NiceGUI web application entry point
# ABOUTME: Provides simple 90s-style pages for bunk decisions, friend votes, confessions and the attendance planner

import asyncio
import logging
from html import escape

from nicegui import app, ui

from bunkmate.api import register_routes
from bunkmate.config import Config
from bunkmate.errors import ValidationError
from bunkmate.orchestrator import AppOrchestrator
from bunkmate.scoring.models import DECISIONS, MOODS, STRICTNESS_LEVELS
from bunkmate.ui.planner_table import PlannerTable

logging.basicConfig(
    level=logging.DEBUG if Config.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

# Initialize orchestrator
orchestrator = AppOrchestrator(api_key=Config.GEMINI_API_KEY)
register_routes(app, orchestrator)
planner_table = PlannerTable(orchestrator.planner)

DECISION_HEADLINES = {
    "bunk": "BUNK IT",
    "risky": "RISKY",
    "attend": "GO TO CLASS",
}

STYLE = """
<style>
    body {
        background-color: #FFFFFF;
        color: #000000;
        font-family: Arial, sans-serif;
    }
    .nicegui-column {
        align-items: center !important;
    }
    .title {
        font-size: clamp(24px, 6vw, 48px);
        font-weight: bold;
        margin-top: 2vh;
        text-align: center;
    }
    .rating {
        font-size: clamp(48px, 16vw, 96px);
        font-weight: bold;
        text-align: center;
    }
    .description {
        font-size: clamp(14px, 3vw, 18px);
        max-width: 90vw;
        text-align: center;
        line-height: 1.6;
    }
    .nav a {
        margin: 0 8px;
        color: #000000;
    }
    .decision-secondary { color: #1b7f1b; }
    .decision-warning { color: #b36b00; }
    .decision-danger { color: #c00000; }
    .confession {
        border: 2px solid #000000;
        padding: 8px 12px;
        margin: 6px 0;
        width: min(90vw, 480px);
    }
    .planner-table td, .planner-table th {
        border: 1px solid #000000;
        padding: 2px 10px;
    }
</style>
"""

FONT_AWESOME = (
    '<link rel="stylesheet" '
    'href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css">'
)


def nav() -> None:
    ui.add_head_html(STYLE)
    ui.add_head_html(FONT_AWESOME)
    ui.html(
        '<div class="nav"><a href="/">DECIDE</a> | <a href="/planner">PLANNER</a> | <a href="/confessions">CONFESSIONS</a></div>',
        sanitize=False
    )


def decision_html(decision: str) -> str:
    """Headline for a decision, colored and iconed by the score calculator"""
    calculator = orchestrator.score_calculator
    return (
        f'<div class="description decision-{calculator.get_decision_color(decision)}">'
        f'<i class="{calculator.get_decision_icon(decision)}"></i> '
        f'<b>{DECISION_HEADLINES[decision]}</b></div>'
    )


@ui.page('/')
async def index():
    """Decision page: inputs in, score + decision + excuse out"""
    nav()

    with ui.column().classes('w-full items-center'):
        ui.html('<div class="title">SHOULD I BUNK TODAY</div>', sanitize=False)

        name = ui.input('Your name').style('width: 280px;')
        attendance = ui.number('Attendance %', value=75, min=0, max=100).style('width: 280px;')
        days = ui.number('Days until exam', value=14, min=1, max=Config.MAX_DAYS_UNTIL_EXAM, precision=0).style('width: 280px;')
        mood = ui.select(list(MOODS), value='tired', label='Mood').style('width: 280px;')
        strictness = ui.select(list(STRICTNESS_LEVELS), value='moderate', label='Professor').style('width: 280px;')

        rating_label = ui.html('<div class="rating">--/100</div>', sanitize=False)
        decision_label = ui.html('<div class="description"></div>', sanitize=False)
        excuse_label = ui.html('<div class="description"></div>', sanitize=False)
        analysis_label = ui.html('<div class="description"></div>', sanitize=False)
        weather_label = ui.html('<div class="description"></div>', sanitize=False)
        share_link = ui.link('', '/').style('display: none;')

        async def decide():
            try:
                loop = asyncio.get_event_loop()
                record = await loop.run_in_executor(
                    None,
                    lambda: orchestrator.make_decision(
                        user_id=(name.value or "anonymous").strip(),
                        attendance_percentage=attendance.value,
                        mood=mood.value,
                        days_until_exam=None if days.value is None else int(days.value),
                        professor_strictness=strictness.value,
                    )
                )
            except ValidationError as e:
                ui.notify(e.message, type='negative')
                return
            except Exception:
                log.exception("Decision failed")
                rating_label.content = '<div class="rating">ERROR</div>'
                decision_label.content = '<div class="description">Something broke. Try again.</div>'
                return

            rating_label.content = f'<div class="rating">{record.bunk_score}/100</div>'
            decision_label.content = decision_html(record.decision)
            excuse_label.content = f'<div class="description">Excuse: {escape(record.ai_excuse)}</div>'
            analysis_label.content = f'<div class="description">{escape(record.ai_analysis)}</div>'
            weather_label.content = (
                f'<div class="description" style="color: #666666;">'
                f'Weather: {escape(record.weather_condition)}, {record.weather_temperature:.0f}°C</div>'
            )
            share_link.text = f'Ask your friends: /vote/{record.id}'
            share_link.props(f'href=/vote/{record.id}')
            share_link.style('display: block;')

        ui.button('SHOULD I?', on_click=decide).style('border: 2px solid black; margin-top: 16px;')


@ui.page('/vote/{decision_id}')
def vote_page(decision_id: int):
    """Friends vote on somebody's decision"""
    nav()
    record = orchestrator.store.get_decision(decision_id)

    with ui.column().classes('w-full items-center'):
        if record is None:
            ui.html('<div class="title">NO SUCH DECISION</div>', sanitize=False)
            return

        ui.html(
            f'<div class="title">{escape(record.user_id)} WANTS TO {record.decision.upper()}</div>'
            f'{decision_html(record.decision)}'
            f'<div class="description">Bunk score {record.bunk_score}/100</div>',
            sanitize=False
        )
        voter = ui.input('Your name').style('width: 280px;')
        tally_label = ui.html('<div class="description"></div>', sanitize=False)

        def show_tally():
            tally = orchestrator.store.get_vote_tally(decision_id)
            tally_label.content = (
                '<div class="description">'
                + " | ".join(f"{k}: {v}" for k, v in tally.items())
                + '</div>'
            )

        def cast(vote: str):
            try:
                orchestrator.cast_vote(decision_id, voter.value or "", vote)
            except ValidationError as e:
                ui.notify(e.message, type='negative')
                return
            show_tally()

        with ui.row():
            for choice in DECISIONS:
                ui.button(choice.upper(), on_click=lambda c=choice: cast(c)).style('border: 2px solid black;')

        show_tally()


@ui.page('/planner')
def planner_page():
    """Attendance planner: table of every attend/bunk split of the remaining classes"""
    nav()

    with ui.column().classes('w-full items-center'):
        ui.html('<div class="title">ATTENDANCE PLANNER</div>', sanitize=False)

        conducted = ui.number('Total classes conducted', value=60, min=0, precision=0).style('width: 280px;')
        attended = ui.number('Classes attended', value=45, min=0, precision=0).style('width: 280px;')
        remaining = ui.number('Remaining classes', value=20, min=0, precision=0).style('width: 280px;')
        threshold = ui.number('Threshold (%)', value=Config.DEFAULT_THRESHOLD, min=0, max=100).style('width: 280px;')

        recommendation_label = ui.html('<div class="description"></div>', sanitize=False)
        extremes_label = ui.html('<div class="description"></div>', sanitize=False)

        custom_attend = ui.number('Classes you plan to attend', min=0, precision=0).style('width: 280px;')
        scenario_label = ui.html('<div class="description"></div>', sanitize=False)
        table_html = ui.html('', sanitize=False)

        def counts() -> dict:
            return {
                "total_conducted": int(conducted.value or 0),
                "attended": int(attended.value or 0),
                "remaining": int(remaining.value or 0),
                "threshold": threshold.value,
            }

        def calculate():
            try:
                result = orchestrator.plan_attendance(**counts())
            except ValidationError as e:
                ui.notify(e.message, type='negative')
                return

            recommendation_label.content = f'<div class="description">{result.icon} {result.recommendation}</div>'
            extremes_label.content = (
                f'<div class="description">Attend all remaining: <b>{result.max_possible:.2f}%</b>'
                f' &nbsp; Bunk all remaining: <b>{result.min_possible:.2f}%</b></div>'
            )
            table_html.content = planner_table.render(result)
            check_scenario()

        def check_scenario():
            if custom_attend.value is None:
                scenario_label.content = '<div class="description"></div>'
                return
            try:
                scenario = orchestrator.check_scenario(attend=int(custom_attend.value), **counts())
            except ValidationError as e:
                scenario_label.content = f'<div class="description" style="color: #c00;">{e.message}</div>'
                return

            scenario_label.content = (
                f'<div class="description">If you attend <b>{scenario.attend}</b> and bunk '
                f'<b>{scenario.bunk}</b>, your final attendance will be <b>{scenario.predicted:.2f}%</b>.</div>'
            )

        custom_attend.on_value_change(lambda: check_scenario())
        ui.button('CALCULATE', on_click=calculate).style('border: 2px solid black; margin-top: 16px;')


@ui.page('/confessions')
def confessions_page():
    """Anonymous confession wall: post a bunk story, like other people's"""
    nav()

    with ui.column().classes('w-full items-center'):
        ui.html('<div class="title">CONFESSION WALL</div>', sanitize=False)
        ui.html('<div class="description">Anonymous funny bunk stories from students</div>', sanitize=False)

        name = ui.input('Your name (never shown)').style('width: 280px;')
        text = ui.textarea(
            'Share your funny bunk story anonymously...',
            validation={'Too long': lambda value: len(value or '') <= Config.MAX_CONFESSION_LENGTH}
        ).style('width: 280px;')
        wall = ui.column().classes('items-center')

        def show_wall():
            wall.clear()
            with wall:
                confessions = orchestrator.get_confessions(limit=20)
                if not confessions:
                    ui.html('<div class="description">No confessions yet. Be the first!</div>', sanitize=False)
                for confession in confessions:
                    ui.html(
                        f'<div class="confession">{escape(confession.text)}'
                        f'<div style="color: #666666;">{confession.created_at:%d %b %H:%M}</div></div>',
                        sanitize=False
                    )
                    ui.button(
                        f'LIKE ({confession.likes})',
                        on_click=lambda c=confession.id: like(c)
                    ).style('border: 2px solid black;')

        def like(confession_id: int):
            orchestrator.like_confession(confession_id)
            show_wall()

        def post():
            try:
                orchestrator.post_confession((name.value or "anonymous").strip(), text.value or "")
            except ValidationError as e:
                ui.notify(e.message, type='negative')
                return
            text.value = ''
            ui.notify('Your anonymous confession has been shared.')
            show_wall()

        ui.button('POST ANONYMOUSLY', on_click=post).style('border: 2px solid black; margin-top: 16px;')
        show_wall()


if __name__ in {"__main__", "__mp_main__"}:
    import os
    port = int(os.environ.get('PORT', 8080))
    ui.run(
        title='Should I Bunk Today',
        host='0.0.0.0',
        port=port,
        reload=False  # Disable reload in production
    )
