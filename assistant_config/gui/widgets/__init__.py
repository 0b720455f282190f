from .labeled_entry import LabeledEntry
from .status_badge import StatusBadge
from .url_list import UrlListEditor

__all__ = ["LabeledEntry", "StatusBadge", "UrlListEditor"]
