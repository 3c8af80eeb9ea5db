"""
Shared fixtures: a throwaway Arma server root with workshop links and keys.
"""

import json
import os
import pytest
from pathlib import Path


def make_mod(content_root: Path, workshop_dir: Path, name: str, key: str = None) -> Path:
    """Create mod content under content_root and link it as !Workshop/@name."""
    content = content_root / name
    (content / "addons").mkdir(parents=True, exist_ok=True)
    (content / "addons" / f"{name.lower()}.pbo").write_bytes(b"pbo")
    if key:
        (content / "keys").mkdir(exist_ok=True)
        (content / "keys" / key).write_bytes(f"key-of-{name}".encode())
    workshop_dir.mkdir(parents=True, exist_ok=True)
    os.symlink(content, workshop_dir / f"@{name}", target_is_directory=True)
    return content


@pytest.fixture
def server_root(tmp_path):
    root = tmp_path / "arma3"
    (root / "!Workshop").mkdir(parents=True)
    (root / "Keys").mkdir()
    (root / "profiles").mkdir()
    (root / "arma3server_x64.exe").write_bytes(b"MZ")
    (root / "basic.cfg").write_text("MaxMsgSend = 128;\n")
    (root / "server.cfg").write_text('hostname = "test";\n')
    return root


@pytest.fixture
def content_root(tmp_path):
    p = tmp_path / "workshop-content"
    p.mkdir()
    return p


@pytest.fixture
def config_data(server_root):
    return {
        "root_path": str(server_root),
        "executable": "arma3server_x64.exe",
        "port": 2302,
        "profile_name": "main",
        "basic_config": "basic.cfg",
        "server_config": "server.cfg",
        "profiles_path": "profiles",
    }


@pytest.fixture
def config_file(tmp_path, config_data):
    p = tmp_path / "launcher.json"
    p.write_text(json.dumps(config_data), encoding="utf-8")
    return p


@pytest.fixture
def launcher_config(config_file):
    from preset_launcher.config_loader import load_config
    return load_config(config_file)


@pytest.fixture
def layout(launcher_config):
    from preset_launcher.fs_layout import build_layout
    return build_layout(launcher_config)
