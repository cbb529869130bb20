# bikeflow/util/log.py
from colorama import Fore, Style

PREFIX = "[bikeflow]"


def info(msg: str):
    print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}")


def done(msg: str):
    print(f"{Fore.GREEN}{msg}{Style.RESET_ALL}")


def warn(msg: str):
    print(f"{Fore.YELLOW}{PREFIX} WARNING: {msg}{Style.RESET_ALL}")


def error(msg: str):
    print(f"{Fore.RED}{PREFIX} ERROR: {msg}{Style.RESET_ALL}")
