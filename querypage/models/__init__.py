from querypage.models.member import Member
from querypage.models.team import Team

__all__ = ["Member", "Team"]
