class InvalidZone(ValueError):
    """A moment was given no time zone; nothing meaningful can be built without one."""

    def __init__(self, caller: str):
        super().__init__(f"persian_calendar: the zone must not be None in call to {caller}")
        self.caller = caller
