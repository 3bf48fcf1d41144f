"""Email addresses as used for login and bank-account identity.

Two addresses that differ only in case or surrounding whitespace are the
same address. Every stored or looked-up email goes through
``normalize_email`` first.
"""

import re
from dataclasses import dataclass
from typing import Union

from tabungan.domain.user.exceptions import InvalidEmailError

# dot-atom local part (RFC 5322 atext, Unicode letters allowed) @ dotted
# domain; no quoting or IP literals
_ADDRESS = re.compile(
    r"^[\w!#$%&'*+/=?^`{|}~.-]+@(?:[\w-]+\.)+[\w-]{2,}$",
)


def normalize_email(email: str) -> str:
    """Strip and lower-case ``email`` without checking its shape."""
    return email.strip().lower()


@dataclass(frozen=True)
class Email:
    """A syntactically valid address, held in normalised form.

    Raises
    ------
    InvalidEmailError
        If the address is empty or does not look like ``local@domain.tld``
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = normalize_email(self.value)
        if not _ADDRESS.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, email: Union[str, "Email"]) -> "Email":
        return email if isinstance(email, cls) else cls(email)

    def __str__(self) -> str:
        return self.value
