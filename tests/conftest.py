import pytest
import yaml

from hamlog_adif.config import Config
from hamlog_adif.models import RequestContext
from hamlog_adif.validator import RequestValidator
from hamlog_adif.web import create_app

SAMPLE_LOG = (
    "JA1ABC,24/05/04,10:15J,59,59,7.032,CW,,,J,Taro,Tokyo,,,\n"
    "JA2XYZ,2024/05/04,01:20U,5/9,5/7,433.2,FM,,,J,Hanako,Nagoya,,,\n"
    "JR3QRP,24/05/04,10:30J,599,579,14.074,ft4,,,J,,Osaka,,,\n"
)


@pytest.fixture
def sample_log():
    return SAMPLE_LOG


@pytest.fixture
def context():
    return RequestContext(
        station="jh1abc",
        operator="jh1abc",
        my_references="JA/TK-001",
        my_qth="PM95",
    )


@pytest.fixture
def valid_form():
    return {
        "activator_call": "JH1ABC",
        "operator": "JH1ABC",
        "my_qth": "PM95",
        "references": "JA/TK-001",
        "his_qth": "",
    }


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Hamlog to ADIF</h1>")
    (directory / "app.js").write_text("console.log('ready');")
    return directory


@pytest.fixture
def config(tmp_path, static_dir):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"static": {"dir": str(static_dir)}}))
    return Config(str(path))


@pytest.fixture
def validator(config):
    return RequestValidator(config["schema"]["path"])


@pytest.fixture
def app(config):
    """Create a Flask test app."""
    application = create_app(config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
