import pytest

from termreq.config import ConfigManager, ExternalEditor
from termreq.files import data_files_dir, requests_dir
from termreq.ids import new_id
from termreq.save_files import SaveFiles
from termreq.view_config import ViewConfig
from termreq.web import Request


def test_editor_read_from_environment(monkeypatch):
    monkeypatch.setenv("EDITOR", "nano")
    assert ExternalEditor.from_env().editor == "nano"


def test_editor_missing_raises(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    with pytest.raises(LookupError, match="EDITOR"):
        ExternalEditor.from_env()


def test_setup_env_creates_folders(tmp_path):
    ConfigManager.setup_env(tmp_path)
    assert requests_dir(tmp_path).is_dir()
    assert data_files_dir(tmp_path).is_dir()


def test_load_builds_configuration(tmp_path, monkeypatch):
    monkeypatch.setenv("EDITOR", "vi")
    manager = ConfigManager.load(tmp_path)
    assert manager.editor == ExternalEditor("vi")
    assert manager.saved_requests.directory == requests_dir(tmp_path)
    assert manager.view == ViewConfig()
    assert manager.view.dimension_percentage() == (50, 50)


def test_load_picks_up_saved_requests(tmp_path, monkeypatch):
    monkeypatch.setenv("EDITOR", "vi")
    saved = SaveFiles.load(requests_dir(tmp_path))
    saved.set(new_id(), Request(name="kept"))

    manager = ConfigManager.load(tmp_path)

    names = [manager.saved_requests.get_request(key).name for key in manager.saved_requests]
    assert names == ["kept"]


def test_load_without_editor_raises(tmp_path, monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    with pytest.raises(LookupError):
        ConfigManager.load(tmp_path)