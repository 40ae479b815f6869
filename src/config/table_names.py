from enum import Enum


class TableNames(str, Enum):
    INVITEES = "invitees"
