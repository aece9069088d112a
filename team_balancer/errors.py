class InsufficientPlayers(ValueError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"need at least {required} players, only {available} available")


class InvalidTeamSize(ValueError):
    def __init__(self, team_size: int, minimum: int, maximum: int):
        self.team_size = team_size
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"team size must be between {minimum} and {maximum}, got {team_size}")
