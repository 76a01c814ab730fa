"""Tests for KubectlCommands."""

from unittest.mock import MagicMock

import pytest

from kubeexec.cli.shell_commands.kubectl import (
    KUBECTL_TIMEOUT_DEFAULT,
    KUBECTL_TIMEOUT_PODS,
    KubectlCommands,
)
from kubeexec.cli.shell_commands.types import CommandResult
from kubeexec.core.errors import KubectlError
from tests.fakes import FakeTerminal


@pytest.fixture
def runner() -> MagicMock:
    return MagicMock()


def _ok(stdout: str) -> CommandResult:
    return CommandResult(success=True, stdout=stdout)


def test_list_contexts(runner):
    runner.run.return_value = _ok("dev\n\nprod-eu\n")

    contexts = KubectlCommands(runner, FakeTerminal()).list_contexts()

    assert contexts == ["dev", "prod-eu"]
    runner.run.assert_called_once_with(
        ["kubectl", "config", "get-contexts", "-o", "name"], timeout=KUBECTL_TIMEOUT_DEFAULT
    )


def test_current_context(runner):
    runner.run.return_value = _ok("dev\n")

    assert KubectlCommands(runner, FakeTerminal()).current_context() == "dev"


def test_current_namespace_passes_context(runner):
    runner.run.return_value = _ok("payments")

    namespace = KubectlCommands(runner, FakeTerminal()).current_namespace("prod-eu")

    assert namespace == "payments"
    cmd = runner.run.call_args.args[0]
    assert cmd[:3] == ["kubectl", "--context", "prod-eu"]
    assert "jsonpath={..namespace}" in cmd


def test_failure_raises_kubectl_error(runner):
    runner.run.return_value = CommandResult(
        success=False, stderr="error: current-context is not set\n", returncode=1
    )

    with pytest.raises(KubectlError) as excinfo:
        KubectlCommands(runner, FakeTerminal()).current_context()

    assert excinfo.value.message == (
        "kubectl config current-context failed: exit status 1: "
        "error: current-context is not set"
    )


class TestListPods:
    def test_namespaced_listing(self, runner):
        runner.run.return_value = _ok(
            "api-7f9    true,true   Running\n"
            "worker-1   true,false  Pending\n"
        )

        pods = KubectlCommands(runner, FakeTerminal()).list_pods("dev", "ops", "app=api", False)

        assert [(p.namespace, p.name, p.ready, p.status) for p in pods] == [
            ("ops", "api-7f9", "2/2", "Running"),
            ("ops", "worker-1", "1/2", "Pending"),
        ]
        cmd = runner.run.call_args.args[0]
        assert cmd[:3] == ["kubectl", "--context", "dev"]
        assert cmd[-4:] == ["-n", "ops", "-l", "app=api"]
        assert "--all-namespaces" not in cmd
        assert runner.run.call_args.kwargs["timeout"] == KUBECTL_TIMEOUT_PODS

    def test_all_namespaces_listing(self, runner):
        runner.run.return_value = _ok(
            "kube-system   coredns-abc   true    Running\n"
            "default       web           <none>  Pending\n"
        )

        pods = KubectlCommands(runner, FakeTerminal()).list_pods("dev", "ignored", "", True)

        assert [(p.namespace, p.name, p.ready) for p in pods] == [
            ("kube-system", "coredns-abc", "1/1"),
            ("default", "web", "-"),
        ]
        assert pods[0].display.startswith("kube-system  coredns-abc")
        cmd = runner.run.call_args.args[0]
        assert "--all-namespaces" in cmd
        assert "-n" not in cmd
        assert any(arg.startswith("custom-columns=NAMESPACE:") for arg in cmd)

    def test_empty_listing(self, runner):
        runner.run.return_value = _ok("")

        assert KubectlCommands(runner, FakeTerminal()).list_pods("dev", "ops", "", False) == []


class TestListContainers:
    def test_declared_default_and_containers(self, runner):
        runner.run.return_value = _ok("app\napp\nistio-proxy\n")

        containers, default = KubectlCommands(runner, FakeTerminal()).list_containers("dev", "ops", "api")

        assert containers == ["app", "istio-proxy"]
        assert default == "app"
        cmd = runner.run.call_args.args[0]
        assert cmd[:6] == ["kubectl", "--context", "dev", "get", "pod", "api"]
        assert cmd[-2:] == ["-n", "ops"]

    def test_no_declared_default(self, runner):
        runner.run.return_value = _ok("\napp\n")

        assert KubectlCommands(runner, FakeTerminal()).list_containers("dev", "ops", "api") == (["app"], "")


class TestRunRemote:
    def test_allocates_tty_when_attached(self, runner):
        runner.run_interactive.return_value = 0

        KubectlCommands(runner, FakeTerminal(tty=True)).run_remote(
            "dev", "ops", "api", "app", ["bash"], False
        )

        runner.run_interactive.assert_called_once_with(
            ["kubectl", "--context", "dev", "exec", "-i", "-t", "-n", "ops", "api", "-c", "app", "--", "bash"]
        )

    def test_returns_remote_status(self, runner):
        runner.run_interactive.return_value = 5

        status = KubectlCommands(runner, FakeTerminal(tty=False)).run_remote(
            "dev", "ops", "api", "app", ["false"], True
        )

        assert status == 5
        cmd = runner.run_interactive.call_args.args[0]
        assert "-i" not in cmd
        assert "-t" not in cmd
