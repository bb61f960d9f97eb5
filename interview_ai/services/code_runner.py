"""
Code execution for coding questions.

Runners are registered per language. Python (and JavaScript when ``node`` is
installed) run in a child process inside a throwaway directory with a
wall-clock timeout. Every other language gets a simulated result that is
flagged as such.

Runs happen on worker threads, so limits are never applied between fork and
exec. The Python child sets its own rlimits before running the script; node
gets a heap cap flag and, where ``prlimit`` exists, a CPU limit.
"""
import logging
import math
import os
import shutil
import subprocess
import sys
import tempfile
import time
from typing import Dict, List, Optional, Protocol
from .. import config
from ..errors import ValidationError
from ..models import CodeRunResult

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = (
    "javascript", "typescript", "python", "java", "csharp", "cpp",
    "go", "ruby", "php", "swift", "rust", "kotlin",
)

SUCCESS_OUTPUT = "Code executed successfully"

# argv: cpu seconds, memory limit in MB (0 for none), script path
LIMITED_PYTHON_LAUNCHER = (
    "import resource, runpy, sys\n"
    "cpu, memory, script = int(sys.argv[1]), int(sys.argv[2]) * 1024 * 1024, sys.argv[3]\n"
    "resource.setrlimit(resource.RLIMIT_CPU, (cpu, cpu))\n"
    "if memory:\n"
    "    resource.setrlimit(resource.RLIMIT_AS, (memory, memory))\n"
    "sys.argv = [script]\n"
    "runpy.run_path(script, run_name='__main__')\n"
)


class CodeRunner(Protocol):
    simulated: bool

    def run(self, code: str) -> str:
        ...


class SimulatedRunner:
    simulated = True

    def __init__(self, language: str):
        self.language = language

    def run(self, code: str) -> str:
        return (
            f"[Simulated {self.language.upper()} Execution]\n\n"
            "Code appears to compile successfully.\n"
            "Output would display here after execution."
        )


class SubprocessRunner:
    simulated = False

    def __init__(self, command: List[str], suffix: str,
                 timeout: float = config.CODE_RUN_TIMEOUT_SECONDS,
                 memory_limit_mb: Optional[int] = None):
        self.command = command
        self.suffix = suffix
        self.timeout = timeout
        self.memory_limit_mb = memory_limit_mb

    @property
    def cpu_seconds(self) -> int:
        # One second above the wall-clock timeout so the timeout fires first
        return math.ceil(self.timeout) + 1

    def build_command(self, script: str) -> List[str]:
        return self.command + [script]

    def run(self, code: str) -> str:
        with tempfile.TemporaryDirectory(prefix="interview-run-") as workdir:
            script = os.path.join(workdir, f"main{self.suffix}")
            with open(script, "w", encoding="utf-8") as f:
                f.write(code)

            try:
                completed = subprocess.run(
                    self.build_command(script),
                    cwd=workdir,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    env={"PATH": os.environ.get("PATH", "")}
                )
            except subprocess.TimeoutExpired:
                return f"Error: execution timed out after {self.timeout:g}s"

        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"process exited with code {completed.returncode}"
            return f"Error: {detail}"
        return completed.stdout.rstrip() or SUCCESS_OUTPUT


class PythonRunner(SubprocessRunner):
    def __init__(self, timeout: float = config.CODE_RUN_TIMEOUT_SECONDS,
                 memory_limit_mb: Optional[int] = None):
        super().__init__([sys.executable, "-I"], ".py", timeout, memory_limit_mb)

    def build_command(self, script: str) -> List[str]:
        if os.name != "posix":
            return self.command + [script]
        return self.command + [
            "-c", LIMITED_PYTHON_LAUNCHER,
            str(self.cpu_seconds), str(self.memory_limit_mb or 0), script
        ]


class NodeRunner(SubprocessRunner):
    def __init__(self, node: str, timeout: float = config.CODE_RUN_TIMEOUT_SECONDS,
                 memory_limit_mb: Optional[int] = None):
        super().__init__([node], ".js", timeout, memory_limit_mb)
        self.prlimit = shutil.which("prlimit")

    def build_command(self, script: str) -> List[str]:
        command = list(self.command)
        # V8 reserves far more address space than it uses, so cap the heap instead of RLIMIT_AS
        if self.memory_limit_mb:
            command.append(f"--max-old-space-size={self.memory_limit_mb}")
        if self.prlimit:
            command = [self.prlimit, f"--cpu={self.cpu_seconds}"] + command
        return command + [script]


def default_runners() -> Dict[str, CodeRunner]:
    runners: Dict[str, CodeRunner] = {
        language: SimulatedRunner(language) for language in SUPPORTED_LANGUAGES
    }
    runners["python"] = PythonRunner(memory_limit_mb=config.CODE_RUN_MEMORY_LIMIT_MB)
    node = shutil.which("node")
    if node:
        runners["javascript"] = NodeRunner(node, memory_limit_mb=config.CODE_RUN_MEMORY_LIMIT_MB)
    else:
        logger.info("node not found, javascript runs are simulated")
    return runners


RUNNERS = default_runners()


def run_code(code: str, language: str, runners: Optional[Dict[str, CodeRunner]] = None,
             delay: Optional[float] = None) -> CodeRunResult:
    language = language.strip().lower()
    runners = RUNNERS if runners is None else runners
    runner = runners.get(language)
    if runner is None:
        raise ValidationError(f"Unsupported language: {language}")
    if not code.strip():
        raise ValidationError("Code is required")

    delay = config.CODE_RUN_DELAY_SECONDS if delay is None else delay
    if delay > 0:
        time.sleep(delay)

    try:
        output = runner.run(code)
    except OSError as e:
        logger.error(f"Error executing {language} code: {str(e)}")
        output = f"Error executing code: {str(e)}"

    logger.info(f"Ran {language} code (simulated={runner.simulated})")
    return CodeRunResult(language=language, output=output, simulated=runner.simulated)
