class SkillDataError(ValueError):
    """Raised when a combatant cannot act because its blueprint has no usable skill."""

    def __init__(self, combatant_name: str, skill_type: str) -> None:
        self.combatant_name = combatant_name
        self.skill_type = skill_type
        super().__init__(f"No skill data found for {combatant_name} ({skill_type})")
