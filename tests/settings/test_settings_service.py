import pytest

from src.shift_savvy.shift_savvy.core.enums import WeekDay
from src.shift_savvy.shift_savvy.core.exceptions import ValidationError
from src.shift_savvy.shift_savvy.settings.model import UserSettings
from src.shift_savvy.shift_savvy.settings.service import SettingsService


@pytest.fixture
def service(settings_repo):
    return SettingsService(settings_repo)


def test_update_saves_changes(service, settings_repo):
    updated = service.update({"theme": "light", "first_day_of_week": "Sun"})

    assert updated.theme == "light"
    assert updated.first_day_of_week == WeekDay.SUN
    assert settings_repo.get() == updated


@pytest.mark.parametrize(
    "changes",
    [
        {"theme": "blue"},
        {"first_day_of_week": "Wed"},
        {"alarm_sound": True},
    ],
)
def test_update_rejects_bad_values(service, settings_repo, changes):
    with pytest.raises(ValidationError):
        service.update(changes)
    assert settings_repo.get() == UserSettings()


@pytest.mark.parametrize("body", [["theme", "light"], "light", 3])
def test_update_rejects_non_object_body(service, body):
    with pytest.raises(ValidationError):
        service.update(body)
