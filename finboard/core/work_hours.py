# finboard/core/work_hours.py
import datetime
from typing import Any, Dict, List, Tuple, Union
from supabase import Client

from finboard.core import db
from finboard.core.errors import ValidationError
from finboard.core.models import WORK_HOURS
from finboard.utils.date_utils import parse_timestamp, utc_now


# --- Sessões ---
def get_work_hours(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, WORK_HOURS, order_by="clock_in", desc=True)


def get_active_session(supabase_client: Client) -> Union[Dict[str, Any], None]:
    """Retorna a sessão aberta (clock_out nulo), se houver."""
    response = supabase_client.table(WORK_HOURS).select("*").is_("clock_out", "null").limit(1).execute()
    return response.data[0] if response.data else None


def clock_in(supabase_client: Client) -> Dict[str, Any]:
    if get_active_session(supabase_client):
        raise ValidationError("A work session is already active")
    return db.insert_row(supabase_client, WORK_HOURS, {"clock_in": utc_now().isoformat()})


def clock_out(supabase_client: Client) -> Dict[str, Any]:
    active = get_active_session(supabase_client)
    if not active:
        raise ValidationError("No active work session")
    return db.update_row(supabase_client, WORK_HOURS, active["id"], {"clock_out": utc_now().isoformat()})


def update_work_entry(supabase_client: Client, entry_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Edita horários e notas de uma sessão."""
    try:
        start = parse_timestamp(data.get("clock_in"))
        end = parse_timestamp(data.get("clock_out"))
    except ValueError:
        raise ValidationError("Invalid date format")
    if start is None:
        raise ValidationError("Clock in time is required")
    if end is not None and end < start:
        raise ValidationError("Clock out cannot be before clock in")
    if end is None:
        active = get_active_session(supabase_client)
        if active and str(active["id"]) != str(entry_id):
            raise ValidationError("A work session is already active")
    return db.update_row(supabase_client, WORK_HOURS, entry_id, {
        "clock_in": start.isoformat(),
        "clock_out": end.isoformat() if end else None,
        "notes": (data.get("notes") or "").strip() or None,
    })


def delete_work_entry(supabase_client: Client, entry_id: str) -> None:
    db.delete_row(supabase_client, WORK_HOURS, entry_id)


# --- Durações ---
def split_duration(seconds: float) -> Tuple[int, int, int]:
    """Horas, minutos e segundos inteiros (divisão inteira, sem arredondar)."""
    total = max(int(seconds), 0)
    return total // 3600, (total % 3600) // 60, total % 60


def session_seconds(entry: Dict[str, Any]) -> float:
    start = parse_timestamp(entry["clock_in"])
    end = parse_timestamp(entry.get("clock_out"))
    if end is None:
        return 0.0
    return (end - start).total_seconds()


def format_duration(clock_in_value: Union[str, datetime.datetime], clock_out_value: Union[str, datetime.datetime, None]) -> str:
    if not clock_out_value:
        return "In Progress"
    hours, minutes, _ = split_duration(session_seconds({"clock_in": clock_in_value, "clock_out": clock_out_value}))
    return f"{hours}h {minutes}m"


def format_active_duration(clock_in_value: Union[str, datetime.datetime], now: Union[datetime.datetime, None] = None) -> str:
    """Duração da sessão em andamento, com segundos (o front atualiza a cada segundo)."""
    now = now or utc_now()
    hours, minutes, seconds = split_duration((now - parse_timestamp(clock_in_value)).total_seconds())
    return f"{hours}h {minutes}m {seconds}s"


def format_total(seconds: float) -> str:
    hours, minutes, _ = split_duration(seconds)
    return f"{hours}h {minutes}m"


def week_start(now: datetime.datetime) -> datetime.datetime:
    """Meia-noite do domingo da semana corrente."""
    days_since_sunday = (now.weekday() + 1) % 7
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - datetime.timedelta(days=days_since_sunday)


def total_today(entries: List[Dict[str, Any]], now: Union[datetime.datetime, None] = None) -> float:
    """Soma (em segundos) das sessões fechadas que começaram hoje."""
    today = (now or utc_now()).date()
    return sum(
        session_seconds(e) for e in entries
        if e.get("clock_out") and parse_timestamp(e["clock_in"]).date() == today
    )


def total_week(entries: List[Dict[str, Any]], now: Union[datetime.datetime, None] = None) -> float:
    start = week_start(now or utc_now())
    return sum(
        session_seconds(e) for e in entries
        if e.get("clock_out") and parse_timestamp(e["clock_in"]) >= start
    )


def with_duration(entry: Dict[str, Any]) -> Dict[str, Any]:
    entry_copy = entry.copy()
    entry_copy["duration"] = format_duration(entry["clock_in"], entry.get("clock_out"))
    return entry_copy
