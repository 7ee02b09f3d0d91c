"""Exceptions raised while turning source files into posts"""


class SkippedDocument(ValueError):
    """A document that cannot become a post. The store logs it and moves on."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Skipping {path}: {reason}")
