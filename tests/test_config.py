import json
from types import SimpleNamespace

import pytest

import config
from core.errors import ReferenceDataError


@pytest.fixture(autouse=True)
def clear_reference_cache():
    config.load_reference_data.cache_clear()
    yield
    config.load_reference_data.cache_clear()


def test_setting_resolution_order(monkeypatch):
    fake_secrets: dict[str, object] = {"LOG_LEVEL": "debug"}
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=fake_secrets), raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    # Streamlit secrets win over environment variables.
    assert config.get_setting("LOG_LEVEL") == "debug"

    # Environment variable is the fallback.
    fake_secrets.clear()
    assert config.get_setting("LOG_LEVEL") == "WARNING"

    # Blank values fall through to the default.
    monkeypatch.setenv("LOG_LEVEL", "   ")
    assert config.get_setting("LOG_LEVEL", "INFO") == "INFO"


def test_missing_secrets_file_is_tolerated(monkeypatch):
    class _NoSecrets:
        def __getitem__(self, key):
            raise FileNotFoundError("secrets.toml")

    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=_NoSecrets()), raising=False)
    monkeypatch.setenv("DEFAULT_LANG", "de")

    assert config.get_setting("DEFAULT_LANG") == "de"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("yes", True), ("On", True), ("0", False), ("false", False), ("", True), (None, True)],
)
def test_normalise_bool(value, expected):
    assert config._normalise_bool(value, default=True) is expected


def test_normalise_bool_warns_on_garbage():
    with pytest.warns(RuntimeWarning):
        assert config._normalise_bool("maybe") is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [("de", "de"), ("DE-de", "de"), ("en_US", "en"), ("fr", "en"), (None, "en")],
)
def test_normalise_language(value, expected):
    assert config.normalise_language(value) == expected


def test_normalise_log_level():
    assert config.normalise_log_level(" debug ") == "DEBUG"
    assert config.normalise_log_level("chatty") == "INFO"


def test_builtin_reference_data_is_default():
    reference = config.get_reference_data()

    assert reference.departments == ["Engineering", "Marketing", "Sales", "HR", "Finance"]
    assert reference.default_job_type == "Full-time"


def test_reference_data_loaded_from_file(tmp_path, monkeypatch):
    source = tmp_path / "reference.json"
    source.write_text(
        json.dumps(
            {
                "departments": [" Engineering ", "Research", ""],
                "job_types": ["Contract", "Full-time"],
                "managers": [{"id": "r-1", "name": "Rita Roe", "department": "Research"}],
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "REFERENCE_DATA_PATH", str(source))

    reference = config.get_reference_data()

    assert reference.departments == ["Engineering", "Research"]
    assert reference.default_job_type == "Contract"
    assert reference.managers_for("Research")[0].display_name == "Rita Roe (Research)"
    assert reference.relationships[0] == "Spouse"


def test_missing_reference_file_raises(tmp_path):
    with pytest.raises(ReferenceDataError, match="Cannot read"):
        config.load_reference_data(str(tmp_path / "missing.json"))


def test_invalid_reference_file_raises(tmp_path):
    source = tmp_path / "reference.json"
    source.write_text(json.dumps({"job_types": []}), encoding="utf-8")

    with pytest.raises(ReferenceDataError, match="Invalid reference data"):
        config.load_reference_data(str(source))
