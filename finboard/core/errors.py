# finboard/core/errors.py


class ValidationError(Exception):
    """Regra de negócio violada antes de qualquer escrita no banco."""


class NotFoundError(Exception):
    """O registro referenciado não existe."""


class AuthenticationError(Exception):
    """Usuário ou senha inválidos."""
