"""
Tests for command line assembly and detached server start.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from preset_launcher.errors import LaunchError
from preset_launcher.models import ResolvedModList
from preset_launcher.process_runner import command_line, posix_argv, spawn_detached
from preset_launcher.server import ServerLauncher, build_arguments


class TestBuildArguments:

    def test_base_order(self, launcher_config, server_root):
        args = build_arguments(launcher_config)
        assert args == [
            "-name=main",
            "-port=2302",
            f'-cfg="{(server_root / "basic.cfg").resolve()}"',
            f'-config="{(server_root / "server.cfg").resolve()}"',
            f'-profiles="{(server_root / "profiles").resolve()}"',
        ]

    def test_mod_flags_appended_in_order(self, launcher_config):
        mods = ResolvedModList(flag="mod", paths=[Path("/w/cba"), Path("/w/ace")])
        servermods = ResolvedModList(flag="servermod", paths=[Path("/w/ace_server")])
        args = build_arguments(launcher_config, mods, servermods)
        assert args[5] == f'-mod="{Path("/w/cba")};{Path("/w/ace")};"'
        assert args[6] == f'-servermod="{Path("/w/ace_server")};"'
        assert len(args) == 7

    def test_only_servermod(self, launcher_config):
        servermods = ResolvedModList(flag="servermod", paths=[Path("/w/x")])
        args = build_arguments(launcher_config, None, servermods)
        assert len(args) == 6
        assert args[-1].startswith("-servermod=")

    def test_flag_left_out_when_nothing_resolved(self, launcher_config):
        args = build_arguments(launcher_config, ResolvedModList(flag="mod", paths=[]))
        assert not any(a.startswith("-mod=") for a in args)


class TestServerLauncher:

    def test_start_spawns_detached(self, launcher_config):
        with patch("preset_launcher.server.spawn_detached") as spawn:
            spawn.return_value = Mock(pid=4242)
            handle = ServerLauncher(launcher_config).start(["-port=2302"])
        assert handle.pid == 4242
        spawn.assert_called_once()
        _, exe, args = spawn.call_args.args
        assert exe == launcher_config.executable_path
        assert args == ["-port=2302"]
        assert spawn.call_args.kwargs["cwd"] == launcher_config.root_path

    def test_missing_executable(self, launcher_config):
        launcher_config.executable_path.unlink()
        with pytest.raises(LaunchError):
            ServerLauncher(launcher_config).start([])

    def test_os_refuses(self, launcher_config):
        with patch("preset_launcher.server.spawn_detached", side_effect=PermissionError("denied")):
            with pytest.raises(LaunchError, match="denied"):
                ServerLauncher(launcher_config).start([])


class TestProcessRunner:

    def test_command_line_quotes_executable(self):
        line = command_line(Path("/srv/arma3server_x64"), ["-port=2302", '-cfg="/srv/basic.cfg"'])
        assert line == f'"{Path("/srv/arma3server_x64")}" -port=2302 -cfg="/srv/basic.cfg"'

    @pytest.mark.skipif(os.name == "nt", reason="POSIX spawn path")
    def test_posix_new_session(self, tmp_path):
        with patch("preset_launcher.process_runner.subprocess.Popen") as popen:
            popen.return_value = Mock(pid=7)
            handle = spawn_detached("server", Path("/srv/arma3server_x64"), ['-cfg="/srv/basic cfg.cfg"'], cwd=tmp_path)
        assert handle.pid == 7
        argv = popen.call_args.args[0]
        assert argv == ["/srv/arma3server_x64", "-cfg=/srv/basic cfg.cfg"]
        assert popen.call_args.kwargs["start_new_session"] is True
        assert popen.call_args.kwargs["cwd"] == str(tmp_path)

    def test_posix_argv_keeps_apostrophes(self):
        argv = posix_argv(Path("/srv/arma3server_x64"), ["-name=Bob's", '-mod="/w/O\'Neil\'s mod;"'])
        assert argv == [str(Path("/srv/arma3server_x64")), "-name=Bob's", "-mod=/w/O'Neil's mod;"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX spawn path")
    def test_apostrophe_profile_starts(self, launcher_config, tmp_path):
        with patch("preset_launcher.process_runner.subprocess.Popen") as popen:
            popen.return_value = Mock(pid=8)
            handle = ServerLauncher(launcher_config).start(["-name=Bob's", "-port=2302"])
        assert handle.pid == 8
        assert popen.call_args.args[0][1:] == ["-name=Bob's", "-port=2302"]
