"""Find git repositories with uncommitted changes or unpushed commits."""

from gittracker.scanner import RepoStatus, ScanResult, scan_root

__all__ = ["RepoStatus", "ScanResult", "scan_root"]
