import pytest

from config.meta import MetaCredentials, normalize_ad_account_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("987654321", "act_987654321"),
        ("act_987654321", "act_987654321"),
        ("", ""),
    ],
)
def test_normalize_ad_account_id(raw, expected):
    assert normalize_ad_account_id(raw) == expected
    assert normalize_ad_account_id(normalize_ad_account_id(raw)) == expected


def test_from_env_reads_and_normalizes(monkeypatch):
    monkeypatch.setenv("META_APP_ID", "app")
    monkeypatch.setenv("META_APP_SECRET", "secret")
    monkeypatch.setenv("META_ACCESS_TOKEN", "token")
    monkeypatch.setenv("META_AD_ACCOUNT_ID", "42")
    monkeypatch.setenv("META_PAGE_ID", "page")
    monkeypatch.setenv("META_API_VERSION", "v21.0")

    credentials = MetaCredentials.from_env()

    assert credentials.ad_account_id == "act_42"
    assert credentials.base_url == "https://graph.facebook.com/v21.0"
    assert credentials.missing_fields() == []


def test_from_env_reports_missing(monkeypatch):
    for var in (
        "META_APP_ID",
        "META_APP_SECRET",
        "META_ACCESS_TOKEN",
        "META_AD_ACCOUNT_ID",
        "META_PAGE_ID",
        "META_API_VERSION",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("META_ACCESS_TOKEN", "token")

    credentials = MetaCredentials.from_env()

    assert credentials.api_version == "v18.0"
    assert credentials.missing_fields() == [
        "META_APP_ID",
        "META_APP_SECRET",
        "META_AD_ACCOUNT_ID",
        "META_PAGE_ID",
    ]


def test_access_token_hidden_from_repr():
    assert "s3cr3t" not in repr(MetaCredentials(access_token="s3cr3t"))
