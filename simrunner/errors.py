# simrunner/errors.py
class AxTapError(Exception):
    pass

# --------------------------
# Targeting (pure pipeline)
# --------------------------
class TargetingError(AxTapError):
    pass

class MalformedTreeError(TargetingError):
    pass

class NoMatchError(TargetingError):
    def __init__(self, kind, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f"No accessibility element matched {kind} '{value}'.")

class AmbiguousMatchError(TargetingError):
    def __init__(self, kind, value: str, count: int, matches=()):
        self.kind = kind
        self.value = value
        self.count = count
        self.matches = tuple(matches)
        super().__init__(f"Multiple ({count}) accessibility elements matched {kind} '{value}'.")

class MissingFrameError(TargetingError):
    def __init__(self, message: str = "Matched element has no frame."):
        super().__init__(message)

class InvalidFrameError(TargetingError):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        super().__init__(f"Matched element has an invalid frame size ({width}x{height}).")

# --------------------------
# Device collaborators
# --------------------------
class SimulatorError(AxTapError):
    pass

class SimulatorNotFoundError(SimulatorError):
    def __init__(self, udid: str):
        self.udid = udid
        super().__init__(f"Simulator with UDID {udid} not found.")

class SimulatorNotBootedError(SimulatorError):
    def __init__(self, udid: str, state: str):
        self.udid = udid
        self.state = state
        super().__init__(f"Simulator {udid} is not booted. Current state: {state}")

class CommandError(AxTapError):
    def __init__(self, args, returncode=None, stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        tool = self.args_list[0] if self.args_list else "?"
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"{tool} failed: {detail}")

class CommandTimeoutError(CommandError):
    def __init__(self, args, timeout: float):
        self.timeout = timeout
        super().__init__(args, returncode=None, stderr=f"timed out after {timeout}s")

class GestureExecutionError(AxTapError):
    pass

class ScreenshotError(AxTapError):
    pass
