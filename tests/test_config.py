import run
from feature_flag_api.app.core.config import Settings


def test_cors_origin_list_splits_and_strips():
    settings = Settings(cors_origins="http://a.test, http://b.test,,")
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_cors_origin_list_wildcard():
    assert Settings(cors_origins="*").cors_origin_list == ["*"]


def test_run_arguments_default_to_settings():
    args = run.parse_args([])
    assert args.host == run.settings.host
    assert args.port == run.settings.port


def test_run_arguments_override_port():
    args = run.parse_args(["--port", "8080", "--host", "127.0.0.1"])
    assert args.port == 8080
    assert args.host == "127.0.0.1"
