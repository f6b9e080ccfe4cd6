"""Basic health check tests."""

import pytest


def test_import_ecolar():
    """Test that ecolar package can be imported."""
    import ecolar
    assert ecolar.__version__ == "1.0.0"


def test_import_onboarding():
    """Test that the onboarding public API can be imported."""
    from onboarding import OnboardingWizard, WizardState, WizardStep, build_payload

    state = WizardState()
    assert state.step == WizardStep.HOME
    assert OnboardingWizard is not None
    assert build_payload is not None


def test_settings_from_env():
    from ecolar.config import get_settings

    settings = get_settings()
    assert settings.supabase_url == "https://test-project.supabase.co"
    assert settings.user_infos_table == "tb_user_infos"
    assert settings.is_development


def test_health_endpoint():
    from fastapi.testclient import TestClient

    from ecolar.web.app import create_app

    client = TestClient(create_app())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestPageUrl:
    def test_known_pages(self):
        from ecolar.web.routes import page_url

        assert page_url("Login") == "/login"
        assert page_url("Dashboard") == "/dashboard"
        assert page_url("Onboarding") == "/onboarding"

    def test_unknown_page(self):
        from ecolar.web.routes import page_url

        with pytest.raises(ValueError):
            page_url("Settings")

    def test_recording_navigator(self):
        from ecolar.web.routes import RecordingNavigator

        nav = RecordingNavigator()
        assert nav.redirect_to is None
        nav("/dashboard")
        assert nav.redirect_to == "/dashboard"
