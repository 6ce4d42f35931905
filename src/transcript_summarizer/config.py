from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List
import json
from pathlib import Path

@dataclass
class SummarizerConfig:
    host: str = "127.0.0.1"
    port: int = 9000
    endpoint: str = "http://127.0.0.1:9000/api/summarize"
    timeout_s: float = 5.0
    default_style: str = "concise"
    default_length: str = "medium"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummarizerConfig":
        return SummarizerConfig(
            host=data.get("host", "127.0.0.1"),
            port=int(data.get("port", 9000)),
            endpoint=data.get("endpoint", "http://127.0.0.1:9000/api/summarize"),
            timeout_s=float(data.get("timeout_s", 5.0)),
            default_style=data.get("default_style", "concise"),
            default_length=data.get("default_length", "medium"),
            cors_origins=list(data.get("cors_origins", ["*"]) or []),
        )

    @staticmethod
    def load(path: Path) -> "SummarizerConfig":
        return SummarizerConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "SummarizerConfig":
        return SummarizerConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "host": self.host,
            "port": self.port,
            "endpoint": self.endpoint,
            "timeout_s": self.timeout_s,
            "default_style": self.default_style,
            "default_length": self.default_length,
            "cors_origins": self.cors_origins,
        }
        return json.dumps(data, indent=2)

def load_or_default(path: Path) -> SummarizerConfig:
    path = Path(path)
    return SummarizerConfig.load(path) if path.exists() else SummarizerConfig()

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummarizerConfig().dump())
