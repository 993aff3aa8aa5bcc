from .printer import ZplPrinter, build_job, CONTROL_COMMANDS
from .backends import make_backend, BaseBackend, NetworkBackend, SerialBackend, USBBackend, DryRunBackend
