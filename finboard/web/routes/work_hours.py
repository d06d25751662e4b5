# finboard/web/routes/work_hours.py
from flask import jsonify

from finboard.core import work_hours
from finboard.utils.date_utils import utc_now
from finboard.web.routes.utils import get_client, json_action, login_required, read_json, success


@login_required
@json_action("list work hours")
def list_work_hours_route():
    entries = work_hours.get_work_hours(get_client())
    now = utc_now()
    active = next((e for e in entries if not e.get("clock_out")), None)
    return jsonify({
        "entries": [work_hours.with_duration(e) for e in entries],
        "active_session": active,
        "active_duration": work_hours.format_active_duration(active["clock_in"], now) if active else "0h 0m",
        "total_today": work_hours.format_total(work_hours.total_today(entries, now)),
        "total_week": work_hours.format_total(work_hours.total_week(entries, now)),
    })


@login_required
@json_action("clock in")
def clock_in_route():
    entry = work_hours.clock_in(get_client())
    return success("Clocked in successfully!", 201, entry=entry)


@login_required
@json_action("clock out")
def clock_out_route():
    entry = work_hours.clock_out(get_client())
    return success("Clocked out successfully!", entry=work_hours.with_duration(entry))


@login_required
@json_action("edit work hours")
def update_work_entry_route(entry_id: str):
    entry = work_hours.update_work_entry(get_client(), entry_id, read_json())
    return success("Work hours updated successfully!", entry=work_hours.with_duration(entry))


@login_required
@json_action("delete work hours")
def delete_work_entry_route(entry_id: str):
    work_hours.delete_work_entry(get_client(), entry_id)
    return success("Work hours deleted successfully!")
