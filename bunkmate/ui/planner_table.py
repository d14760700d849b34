# ABOUTME: HTML rendering of the attendance projection table
# ABOUTME: Colors each attend/bunk row Safe, Borderline or Unsafe against the threshold

from html import escape

from bunkmate.planner.calculator import AttendancePlanner
from bunkmate.planner.models import BORDERLINE, SAFE, STATUS_ICONS, UNSAFE, PlannerResult

ROW_COLORS = {
    SAFE: "#d9f7d9",
    BORDERLINE: "#fff4c2",
    UNSAFE: "#ffd6d6",
}


class PlannerTable:
    """Renders a PlannerResult as a plain 90s-style HTML table"""

    def __init__(self, planner: AttendancePlanner):
        self.planner = planner

    def render(self, result: PlannerResult) -> str:
        rows = []
        for row in result.table:
            status = self.planner.classify_row(row, result.threshold)
            rows.append(
                f'<tr style="background: {ROW_COLORS[status]}; text-align: center;">'
                f'<td>{row.attend}</td><td>{row.bunk}</td>'
                f'<td>{row.predicted:.2f}</td>'
                f'<td>{STATUS_ICONS[status]} {status}</td></tr>'
            )

        return (
            '<table class="planner-table" style="border-collapse: collapse; border: 2px solid #000000;">'
            '<thead><tr><th>Attend</th><th>Bunk</th><th>Predicted Attendance (%)</th><th>Status</th></tr></thead>'
            f'<tbody>{"".join(rows)}</tbody></table>'
            f'{self.render_legend()}'
        )

    def render_legend(self) -> str:
        margin = f"{self.planner.borderline_margin:g}"
        items = [
            f"{STATUS_ICONS[SAFE]} Safe (at or above threshold)",
            f"{STATUS_ICONS[BORDERLINE]} Borderline (within {margin}% below threshold)",
            f"{STATUS_ICONS[UNSAFE]} Unsafe (below threshold)",
        ]
        return '<div class="legend">' + " &nbsp; ".join(escape(item) for item in items) + '</div>'
