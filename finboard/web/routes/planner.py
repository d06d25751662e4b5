# finboard/web/routes/planner.py
import datetime

from flask import jsonify, request

from finboard.core import planner
from finboard.utils.date_utils import utc_now
from finboard.web.routes.utils import get_client, json_action, login_required, read_json, success


@login_required
@json_action("list events")
def list_events_route():
    events = planner.get_events(get_client())
    day = request.args.get("date")
    if day:
        try:
            events = planner.events_for_date(events, datetime.date.fromisoformat(day))
        except ValueError:
            return jsonify({"error": "Invalid date format"}), 400
    return jsonify(events)


@login_required
@json_action("add event")
def add_event_route():
    event = planner.add_event(get_client(), read_json())
    return success("Event added successfully!", 201, event=event)


@login_required
@json_action("delete event")
def delete_event_route(event_id: str):
    planner.delete_event(get_client(), event_id)
    return success("Event deleted successfully!")


@login_required
@json_action("month view")
def month_route():
    today = utc_now().date()
    year = request.args.get("year", default=today.year, type=int)
    month = request.args.get("month", default=today.month, type=int)
    grid = planner.month_grid(year, month)
    grid["previous"] = planner.previous_month(year, month)
    grid["next"] = planner.next_month(year, month)
    return jsonify(grid)


@login_required
@json_action("list tasks")
def list_tasks_route():
    pending, completed = planner.split_tasks(planner.get_tasks(get_client()))
    return jsonify({"pending": pending, "completed": completed})


@login_required
@json_action("add task")
def add_task_route():
    task = planner.add_task(get_client(), read_json())
    return success("Task added successfully!", 201, task=task)


@login_required
@json_action("toggle task")
def toggle_task_route(task_id: str):
    task = planner.toggle_task(get_client(), task_id)
    return success("Task updated.", task=task)


@login_required
@json_action("delete task")
def delete_task_route(task_id: str):
    planner.delete_task(get_client(), task_id)
    return success("Task deleted successfully!")
