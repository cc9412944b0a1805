from corsheaders.defaults import default_headers
from django.conf import settings


def test_cors_allows_only_default_headers():
    assert settings.CORS_ALLOW_HEADERS == list(default_headers)
