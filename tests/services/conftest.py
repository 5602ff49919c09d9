import datetime

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from app.services.battle import BattleService
from app.services.config import ConfigService
from app.services.earning import EarningService
from app.services.team import TeamService

GAME_DAY = datetime.date(2025, 3, 14)


@pytest.fixture
def team_service(session: AsyncSession) -> TeamService:
    return TeamService(session)


@pytest.fixture
def config_service(session: AsyncSession) -> ConfigService:
    return ConfigService(session)


@pytest.fixture
def earning_service(
    session: AsyncSession, config_service: ConfigService, team_service: TeamService
) -> EarningService:
    service = EarningService(session, config_service=config_service, team_service=team_service)
    service.today = lambda: GAME_DAY
    return service


@pytest.fixture
def battle_service(
    session: AsyncSession, team_service: TeamService, earning_service: EarningService
) -> BattleService:
    return BattleService(session, team_service=team_service, earning_service=earning_service)
