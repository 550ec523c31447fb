"""
Runner de procesos falso para los tests: no lanza ningún proceso
"""
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from dbbackup.process_runner import ProcessResult, ProcessRunner


@dataclass
class Call:
    """Invocación registrada"""
    argv: List[str]
    stdin: Optional[bytes]
    env: Optional[Dict[str, str]]


class FakeProcessRunner(ProcessRunner):
    """Devuelve resultados programados según los tokens del argv"""

    def __init__(self):
        self.calls: List[Call] = []
        self._rules = []

    def when(self, *tokens, returncode=0, stdout=b"", stderr=b"", raises=None):
        """
        Programa la respuesta para todo argv que contenga los tokens

        La primera regla registrada que coincide gana.
        """
        self._rules.append((tokens, ProcessResult(returncode, stdout, stderr), raises))
        return self

    def run(self, argv, stdin=None, env=None):
        argv = list(argv)
        self.calls.append(Call(argv, stdin, dict(env) if env else None))
        for tokens, result, raises in self._rules:
            if all(token in argv for token in tokens):
                if raises is not None:
                    raise raises
                return result
        return ProcessResult(0)

    def commands(self):
        return [call.argv for call in self.calls]
