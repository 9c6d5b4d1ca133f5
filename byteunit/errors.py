class InvalidFormat(ValueError):
    """Text is not a number followed by one of B, KB, MB, GB, TB."""

    FORMATS = 'nB, nKB, nMB, nGB, nTB'

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        super().__init__(text, reason)

    def __str__(self) -> str:
        msg = (
            f'invalid format for unit size: {self.text}. '
            f'Acceptable formats are {self.FORMATS}'
        )
        return f'{msg}: {self.reason}' if self.reason else msg
