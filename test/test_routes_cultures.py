"""
Tests for the culture information routes and the sample localized pages
"""


class TestCultureRoutes:
    def _get_all_paths(self, client):
        return [r.path for r in client.app.routes]

    def test_paths_registered(self, client):
        paths = self._get_all_paths(client)
        assert "/api/v1/i18n/cultures" in paths
        assert "/api/v1/i18n/cultures/{name}" in paths
        assert "/api/v1/i18n/culture" in paths

    def test_list_cultures_in_configured_order(self, client):
        response = client.get("/api/v1/i18n/cultures")
        assert response.status_code == 200
        data = response.json()
        assert [c["code"] for c in data] == ["ga", "en"]

    def test_list_cultures_fields(self, client):
        first = client.get("/api/v1/i18n/cultures").json()[0]
        assert first == {
            "code": "ga",
            "name": "Gaeilge",
            "two_letter": "ga",
            "three_letter": "gle",
            "is_rtl": False,
            "is_default": True,
        }

    def test_get_single_culture(self, client):
        response = client.get("/api/v1/i18n/cultures/en")
        assert response.status_code == 200
        assert response.json()["three_letter"] == "eng"
        assert response.json()["is_default"] is False

    def test_unsupported_culture_returns_error_envelope(self, client):
        response = client.get("/api/v1/i18n/cultures/fr")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == "RESOURCE_NOT_FOUND"
        assert error["details"]["culture"] == "fr"
        assert error["path"] == "/api/v1/i18n/cultures/fr"

    def test_current_culture_is_default_on_excluded_api_route(self, make_client):
        client = make_client(excluded_routes=[r"^/api/"])
        response = client.get("/api/v1/i18n/culture", headers={"Accept-Language": "en"})
        assert response.json() == {"culture": "ga", "ui_culture": "ga"}

    def test_current_culture_when_api_not_excluded(self, make_client):
        """A non-root API path is read as a culture path: 'api' is not a culture."""
        client = make_client(excluded_routes=[])
        response = client.get("/api/v1/i18n/culture")
        assert response.json() == {"culture": "ga", "ui_culture": "ga"}


class TestLocalizedPages:
    def test_root_without_signals(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"culture": "ga", "ui_culture": "ga"}
        assert response.headers["content-language"] == "ga"

    def test_root_accept_language(self, client):
        response = client.get("/", headers={"Accept-Language": "en"})
        assert response.json() == {"culture": "en", "ui_culture": "en"}

    def test_root_cookie_wins_over_header(self, client):
        client.cookies.set("culture", "c=ga|uic=ga")
        response = client.get("/", headers={"Accept-Language": "en"})
        assert response.json()["culture"] == "ga"

    def test_culture_page(self, client):
        response = client.get("/en/about/team")
        data = response.json()
        assert data["page"] == "about/team"
        assert data["culture"] == "en"
        assert data["language"]["name"] == "English"

    def test_unsupported_path_culture_passes_through(self, client):
        response = client.get("/fr/about")
        assert response.json()["culture"] == "fr"

    def test_malformed_path_culture_falls_back(self, make_client):
        client = make_client(default_ui_culture="en")
        response = client.get("/123/about")
        data = response.json()
        assert data["culture"] == "ga"
        assert data["ui_culture"] == "en"

    def test_health_is_excluded(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert "content-language" not in response.headers

    def test_redirect_setting(self, make_client):
        client = make_client(redirect_to_culture_path=True)
        response = client.get("/", headers={"Accept-Language": "en"})
        assert response.status_code == 307
        assert response.headers["location"] == "/en"
