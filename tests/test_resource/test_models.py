"""Tests for resource data models."""

from __future__ import annotations

from pipelint.resource.models import Container, Pipeline, Volume


class TestContainer:
    def test_defaults(self) -> None:
        c = Container()
        assert c.name == ""
        assert c.image == ""
        assert c.privileged is False
        assert c.ports == []
        assert c.devices == []
        assert c.dns == []
        assert c.network_mode == ""

    def test_port_shorthand(self) -> None:
        c = Container.model_validate({"ports": [80, {"port": 443, "host": 8443}]})
        assert c.ports[0].port == 80
        assert c.ports[0].host is None
        assert c.ports[1].port == 443
        assert c.ports[1].host == 8443

    def test_unknown_keys_ignored(self) -> None:
        c = Container.model_validate({"name": "a", "image": "b", "settings": {"repo": "x"}})
        assert c.name == "a"


class TestVolume:
    def test_yaml_keys(self) -> None:
        v = Volume.model_validate({"name": "cache", "host": {"path": "/tmp"}})
        assert v.is_host_path
        assert v.host_path.path == "/tmp"

    def test_temp_key(self) -> None:
        v = Volume.model_validate({"name": "cache", "temp": {"medium": "memory"}})
        assert v.is_in_memory

    def test_no_kind(self) -> None:
        v = Volume(name="cache")
        assert not v.is_host_path
        assert not v.is_in_memory


class TestPipeline:
    def test_defaults(self) -> None:
        p = Pipeline()
        assert p.kind == "pipeline"
        assert p.build is None
        assert p.platform.os == ""
        assert p.platform.arch == ""
        assert p.steps == []
        assert p.services == []
