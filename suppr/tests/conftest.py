import logging
import subprocess

import pytest

from suppr.modules import kubectl

NODES = (
    "NAME     STATUS     ROLES           AGE   VERSION\n"
    "master   Ready      control-plane   12d   v1.29.2\n"
    "worker   NotReady   <none>          12d   v1.29.2\n"
)

EVENTS = (
    "NAMESPACE     LAST SEEN   TYPE      REASON    OBJECT            MESSAGE\n"
    "default       2m          Normal    Pulled    pod/web-1         Container image already present\n"
    "kube-system   1m          Warning   BackOff   pod/coredns-abc   Back-off restarting failed container\n"
)

PODS = (
    "NAMESPACE     NAME          READY   STATUS    RESTARTS      AGE\n"
    "default       web-1         1/1     Running   0             3d\n"
    "kube-system   coredns-abc   0/1     Running   7 (2m ago)    3d\n"
)


class FakeKubectl:
    """Stands in for subprocess.run and answers by kubectl arguments."""

    def __init__(self):
        self.calls = []
        self.responses = {
            ("get", "nodes"): (0, NODES.encode()),
            ("get", "nodes", "|", "grep", "NotReady"): (1, b""),
            ("get", "events", "-A"): (0, EVENTS.encode()),
            ("get", "pods", "-A"): (0, PODS.encode()),
        }
        self.missing = False

    def respond(self, args, returncode, stdout):
        if isinstance(stdout, str):
            stdout = stdout.encode()
        self.responses[tuple(args)] = (returncode, stdout)

    def __call__(self, argv, capture_output=False, **kwargs):
        self.calls.append(list(argv))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        returncode, stdout = self.responses.get(tuple(argv[3:]), (1, b""))
        stderr = b"" if returncode == 0 else b"error: the server doesn't have a resource type\n"
        return subprocess.CompletedProcess(argv, returncode, stdout, stderr)


@pytest.fixture
def fake_kubectl(monkeypatch):
    fake = FakeKubectl()
    monkeypatch.setattr(kubectl.subprocess, "run", fake)
    return fake


@pytest.fixture(autouse=True)
def reset_suppr_logger():
    yield
    logger = logging.getLogger("suppr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
