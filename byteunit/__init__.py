from .errors import InvalidFormat
from .unit import GB, KB, MB, TB, Unit

__all__ = ['GB', 'KB', 'MB', 'TB', 'InvalidFormat', 'Unit']
