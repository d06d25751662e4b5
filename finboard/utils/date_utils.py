# finboard/utils/date_utils.py
import datetime
from typing import Union


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def now_iso() -> str:
    """Data/hora atual em UTC no formato ISO aceito pelo Supabase."""
    return utc_now().isoformat()


def parse_timestamp(value: Union[str, datetime.datetime, None]) -> Union[datetime.datetime, None]:
    """Converte o timestamp do Supabase (ISO, com 'Z' ou offset) para datetime com fuso UTC.
    Timestamps sem fuso são tratados como UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)


def in_month(value: Union[str, datetime.datetime, None], year: Union[int, None], month: Union[int, None]) -> bool:
    """Verifica se o timestamp cai no ano/mês informados (filtros opcionais)."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return False
    if year and parsed.year != year:
        return False
    if month and parsed.month != month:
        return False
    return True
