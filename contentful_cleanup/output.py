"""Console output: colors, status lines and the progress bar."""

import sys

# ============================================
# COLOR OUTPUT
# ============================================

class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

def print_banner(title: str, subtitle: str = ""):
    print(f"\n{Colors.BOLD}{Colors.BLUE}")
    print("╔═══════════════════════════════════════════════════════════════╗")
    print(f"║   {title:<60}║")
    if subtitle:
        print(f"║   {subtitle:<60}║")
    print("╚═══════════════════════════════════════════════════════════════╝")
    print(f"{Colors.RESET}")

def print_header(text: str):
    print(f"\n{Colors.BLUE}{'='*70}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.BLUE}  {text}{Colors.RESET}")
    print(f"{Colors.BLUE}{'='*70}{Colors.RESET}\n")

def print_subheader(text: str):
    print(f"\n{Colors.CYAN}── {text} ──{Colors.RESET}\n")

def print_success(text: str):
    print(f"  {Colors.GREEN}✓{Colors.RESET} {text}")

def print_error(text: str):
    print(f"  {Colors.RED}✗{Colors.RESET} {text}", file=sys.stderr)

def print_warning(text: str):
    print(f"  {Colors.YELLOW}⚠{Colors.RESET} {text}")

def print_info(text: str):
    print(f"  {Colors.CYAN}ℹ{Colors.RESET} {text}")

def print_progress(current: int, total: int, item_name: str = ""):
    percentage = (current / total) * 100 if total > 0 else 0
    bar_len = 30
    filled = int(bar_len * current / total) if total > 0 else 0
    bar = '█' * filled + '░' * (bar_len - filled)
    print(f"\r  [{bar}] {current}/{total} ({percentage:.1f}%) {item_name[:40]:<40}", end='', flush=True)

# ============================================
# PROGRESS OBSERVERS
# ============================================

class ProgressBar:
    """Draws an in-place progress bar for a known number of steps"""

    def __init__(self, label: str = ""):
        self.label = label
        self.total = 0
        self.current = 0
        self.active = False

    def start(self, total: int):
        self.total = total
        self.current = 0
        self.active = True
        print_progress(self.current, self.total, self.label)

    def increment(self, item_name: str = ""):
        self.current += 1
        print_progress(self.current, self.total, item_name or self.label)

    def stop(self):
        if self.active:
            print()  # New line after progress bar
        self.active = False


class NullProgress:
    """Progress observer that ignores every notification"""

    def start(self, total: int):
        pass

    def increment(self, item_name: str = ""):
        pass

    def stop(self):
        pass
