import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from colorama import Fore, Style, init

init(autoreset=True)

MAX_EVENTS = 500


class InterviewChatLogger:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self.logger = logging.getLogger("interview_chat")
        self.reset()

    def _get_color(self, stage: str) -> str:
        colors = {
            "Prompt": Fore.CYAN,
            "Gateway": Fore.GREEN,
            "Evaluator": Fore.MAGENTA,
            "Session": Fore.BLUE,
            "System": Fore.WHITE
        }
        return colors.get(stage, Fore.WHITE)

    def log(self, stage: str, message: str, data: Dict[str, Any] | None = None, level: int = logging.INFO):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "stage": stage,
            "message": message,
            "data": data or {}
        }
        self.events.append(log_entry)
        if len(self.events) > self.max_events:
            del self.events[:len(self.events) - self.max_events]

        color = self._get_color(stage)
        formatted_msg = f"{color}[LOG :: {stage.upper()}]{Style.RESET_ALL} {message}"
        if data:
            formatted_msg += f" | Data: {json.dumps(data, ensure_ascii=False, default=str)}"

        self.logger.log(level, formatted_msg)

    def warning(self, stage: str, message: str, data: Dict[str, Any] | None = None):
        self.log(stage, message, data, level=logging.WARNING)

    def log_tokens(self, prompt_tokens: int, completion_tokens: int):
        self.metrics["prompt_tokens"] += prompt_tokens
        self.metrics["completion_tokens"] += completion_tokens
        self.metrics["total_tokens"] += prompt_tokens + completion_tokens
        self.log("System", f"[METRIC :: TOKENS] +{prompt_tokens} prompt, +{completion_tokens} completion")

    def log_latency(self, latency_ms: float):
        self.metrics["latency_ms"].append(latency_ms)
        if len(self.metrics["latency_ms"]) > self.max_events:
            del self.metrics["latency_ms"][0]
        self.metrics["completions"] += 1
        self.log("System", f"[METRIC :: LATENCY] {latency_ms:.2f}ms")

    def get_metrics(self) -> Dict[str, Any]:
        latencies = self.metrics["latency_ms"]
        return {
            "completions": self.metrics["completions"],
            "total_tokens": self.metrics["total_tokens"],
            "prompt_tokens": self.metrics["prompt_tokens"],
            "completion_tokens": self.metrics["completion_tokens"],
            "avg_latency": sum(latencies) / len(latencies) if latencies else 0
        }

    def reset(self):
        self.events: List[Dict[str, Any]] = []
        self.metrics: Dict[str, Any] = {
            "completions": 0,
            "total_tokens": 0,
            "prompt_tokens": 0,
            "completion_tokens": 0,
            "latency_ms": []
        }
