from src.shift_savvy.shift_savvy.attendance.factory import StatusStrategyFactory
from src.shift_savvy.shift_savvy.attendance.strategies.early_strategy import EarlyLeaveStrategy
from src.shift_savvy.shift_savvy.attendance.strategies.late_and_early_strategy import LateAndEarlyStrategy
from src.shift_savvy.shift_savvy.attendance.strategies.late_strategy import LateStrategy
from src.shift_savvy.shift_savvy.attendance.strategies.normal_strategy import NormalStrategy
from src.shift_savvy.shift_savvy.core.enums import WorkStatus


def test_factory_picks_normal_when_no_infraction():
    strategy = StatusStrategyFactory().for_metrics(late_minutes=0, early_minutes=0)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide(late_minutes=0, early_minutes=0).status == WorkStatus.COMPLETED


def test_factory_picks_late():
    strategy = StatusStrategyFactory().for_metrics(late_minutes=3, early_minutes=0)

    assert isinstance(strategy, LateStrategy)


def test_factory_picks_early_leave():
    strategy = StatusStrategyFactory().for_metrics(late_minutes=0, early_minutes=12)

    assert isinstance(strategy, EarlyLeaveStrategy)
    decision = strategy.decide(late_minutes=0, early_minutes=12)
    assert decision.status == WorkStatus.EARLY_LEAVE
    assert decision.remarks == "Về sớm 12 phút."


def test_factory_picks_late_and_early():
    strategy = StatusStrategyFactory().for_metrics(late_minutes=20, early_minutes=15)

    assert isinstance(strategy, LateAndEarlyStrategy)
    decision = strategy.decide(late_minutes=20, early_minutes=15)
    assert decision.status == WorkStatus.LATE_AND_EARLY
    assert decision.remarks == "Đi muộn 20 phút. Về sớm 15 phút."
