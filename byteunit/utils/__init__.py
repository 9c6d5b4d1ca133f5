from .console import LEVELS, Progress, cnsl, log_level, set_logger

__all__ = ['LEVELS', 'Progress', 'cnsl', 'log_level', 'set_logger']
