import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tape_machine_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def log(self, entry: dict):
        """Append a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_run(self, summary, machine, initial_tape):
        """Record one finished simulation, keyed by the machine fingerprint."""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "fingerprint": machine.fingerprint(),
            "initial_tape": initial_tape,
        }
        entry.update(summary.to_entry())
        self.log(entry)
        return entry

    def read_entries(self):
        if not os.path.exists(self.current_log):
            return []
        with open(self.current_log, "r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
