from tabungan.domain.user.value_objects.email import Email, normalize_email

__all__ = ["Email", "normalize_email"]
