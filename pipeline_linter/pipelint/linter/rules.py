"""Deterministic lint rules for pipeline resources.

Each check either returns ``None`` or raises :class:`LintError` for the
first violated rule. Checks are pure: no I/O, no logging, no state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from pipelint.resource.models import Container, Pipeline, Volume

T = TypeVar("T")

SUPPORTED_OS = frozenset({"linux", "windows"})
SUPPORTED_ARCH = frozenset({"amd64", "arm", "arm64"})

# Used internally by the runner; user volumes must not shadow them.
RESERVED_VOLUME_NAMES = frozenset({"_workspace", "_docker_socket"})


class LintError(Exception):
    """A pipeline resource violates a lint rule."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"linter: {reason}")


Rule = tuple[Callable[[T], bool], str]

# Privileged features, in evaluation order. Skipped for trusted repositories.
VOLUME_RULES: list[Rule[Volume]] = [
    (lambda v: v.is_host_path, "untrusted repositories cannot mount host volumes"),
    (lambda v: v.is_in_memory, "untrusted repositories cannot mount in-memory volumes"),
]

CONTAINER_RULES: list[Rule[Container]] = [
    (
        lambda c: any(p.host is not None for p in c.ports),
        "untrusted repositories cannot map to a host port",
    ),
    (lambda c: bool(c.devices), "untrusted repositories cannot mount devices"),
    (lambda c: c.privileged, "untrusted repositories cannot enable privileged mode"),
    (lambda c: bool(c.dns), "untrusted repositories cannot configure dns"),
    (lambda c: bool(c.dns_search), "untrusted repositories cannot configure dns_search"),
    (lambda c: bool(c.extra_hosts), "untrusted repositories cannot configure extra_hosts"),
    (lambda c: bool(c.network_mode), "untrusted repositories cannot configure network_mode"),
]


def _apply_rules(rules: Iterable[Rule[T]], item: T) -> None:
    for predicate, reason in rules:
        if predicate(item):
            raise LintError(reason)


def check_platform(pipeline: Pipeline) -> None:
    """Reject operating systems and architectures the runners do not support."""
    platform = pipeline.platform
    if platform.os and platform.os not in SUPPORTED_OS:
        raise LintError(f"unsupported os: {platform.os}")
    if platform.arch and platform.arch not in SUPPORTED_ARCH:
        raise LintError(f"unsupported architecture: {platform.arch}")


def check_volume(volume: Volume, trusted: bool) -> None:
    if volume.name in RESERVED_VOLUME_NAMES:
        raise LintError(f"invalid volume name: {volume.name}")
    if not trusted:
        _apply_rules(VOLUME_RULES, volume)


def check_container(container: Container, trusted: bool) -> None:
    if not container.name:
        raise LintError("invalid or missing name")
    if not container.image:
        raise LintError("invalid or missing image")
    if not trusted:
        _apply_rules(CONTAINER_RULES, container)


def check_duplicate_names(pipeline: Pipeline) -> None:
    """Steps and services share one namespace."""
    seen: set[str] = set()
    for container in [*pipeline.steps, *pipeline.services]:
        if container.name in seen:
            raise LintError("duplicate step names")
        seen.add(container.name)


def check_dependencies(pipeline: Pipeline) -> None:
    """Every ``depends_on`` entry of a step must name another declared step."""
    names = {step.name for step in pipeline.steps}
    for step in pipeline.steps:
        for dep in step.depends_on:
            if dep == step.name:
                raise LintError(f"cyclical step dependency detected: {dep}")
            if dep not in names:
                raise LintError(
                    f"unknown step dependency detected: {step.name} references {dep}"
                )


def check_resource(pipeline: Pipeline, trusted: bool) -> None:
    """Structural and privilege checks over build template, volumes and containers.

    Order: build image -> volumes -> duplicate names -> services -> steps
    -> step dependencies. The first violation is raised.
    """
    if pipeline.build is not None and not pipeline.build.image:
        raise LintError("invalid or missing build image")

    for volume in pipeline.volumes:
        check_volume(volume, trusted)

    check_duplicate_names(pipeline)

    for container in [*pipeline.services, *pipeline.steps]:
        check_container(container, trusted)

    check_dependencies(pipeline)
