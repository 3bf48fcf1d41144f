from tabungan.domain.user.aggregates.user import User

__all__ = ["User"]
