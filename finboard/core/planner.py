# finboard/core/planner.py
import calendar
import datetime
from typing import Any, Dict, List, Tuple
from supabase import Client

from finboard.core import db
from finboard.core.errors import ValidationError
from finboard.core.models import CALENDAR_EVENTS, TASKS
from finboard.utils.date_utils import now_iso, parse_timestamp


# --- Eventos ---
def get_events(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, CALENDAR_EVENTS, order_by="date", desc=False)


def add_event(supabase_client: Client, data: Dict[str, Any]) -> Dict[str, Any]:
    title = (data.get("title") or "").strip()
    if not title:
        raise ValidationError("Title is required")
    try:
        date = parse_timestamp(data.get("date"))
    except ValueError:
        raise ValidationError("Invalid date format")
    if date is None:
        raise ValidationError("Date is required")
    return db.insert_row(supabase_client, CALENDAR_EVENTS, {
        "title": title,
        "description": (data.get("description") or "").strip() or None,
        "date": date.isoformat(),
        "is_reminder": bool(data.get("is_reminder", False)),
    })


def delete_event(supabase_client: Client, event_id: str) -> None:
    db.delete_row(supabase_client, CALENDAR_EVENTS, event_id)


def events_for_date(events: List[Dict[str, Any]], day: datetime.date) -> List[Dict[str, Any]]:
    return [e for e in events if parse_timestamp(e["date"]).date() == day]


# --- Tarefas ---
def get_tasks(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, TASKS, order_by="date", desc=True)


def add_task(supabase_client: Client, data: Dict[str, Any]) -> Dict[str, Any]:
    title = (data.get("title") or "").strip()
    if not title:
        raise ValidationError("Title is required")
    return db.insert_row(supabase_client, TASKS, {
        "title": title,
        "description": (data.get("description") or "").strip() or None,
        "date": now_iso(),
        "completed": False,
    })


def toggle_task(supabase_client: Client, task_id: str) -> Dict[str, Any]:
    task = db.get_row(supabase_client, TASKS, task_id)
    return db.update_row(supabase_client, TASKS, task_id, {"completed": not task.get("completed", False)})


def delete_task(supabase_client: Client, task_id: str) -> None:
    db.delete_row(supabase_client, TASKS, task_id)


def split_tasks(tasks: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Separa tarefas pendentes e concluídas."""
    pending = [t for t in tasks if not t.get("completed")]
    completed = [t for t in tasks if t.get("completed")]
    return pending, completed


# --- Grade do mês ---
def month_grid(year: int, month: int) -> Dict[str, int]:
    """Dias do mês e dia da semana do dia 1 (domingo = 0)."""
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    first_weekday, days_in_month = calendar.monthrange(year, month)
    return {
        "year": year,
        "month": month,
        "days_in_month": days_in_month,
        "starting_day_of_week": (first_weekday + 1) % 7,
    }


def previous_month(year: int, month: int) -> Tuple[int, int]:
    return (year - 1, 12) if month == 1 else (year, month - 1)


def next_month(year: int, month: int) -> Tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)
