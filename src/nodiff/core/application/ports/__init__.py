from nodiff.core.application.ports.hosting_port import HostingPort
from nodiff.core.application.ports.run_status_port import RunStatusPort
from nodiff.core.application.ports.vcs_port import VcsPort

__all__ = ["HostingPort", "RunStatusPort", "VcsPort"]
