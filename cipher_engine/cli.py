import sys
import argparse
import random
from typing import Callable, Optional, TextIO, TypeVar

from . import __version__
from .engine import CIPHER_REGISTRY, CipherStrategy, list_cipher_names
from .errors import EncodingError

T = TypeVar("T")

DEFAULT_METHOD = "shift"

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  INPUT: Re-prompting Line Reader
# ==========================================

def process_input(prompt: str, parse: Callable[[str], T], reader: TextIO) -> T:
    """
    Read lines from ``reader`` until one parses.

    Each failed line is reported on stderr and the prompt is shown again.
    Raises EOFError if input runs out first.
    """
    while True:
        print(prompt, file=sys.stderr)
        line = reader.readline()
        if not line:
            raise EOFError("Input ended before a valid value was entered.")
        try:
            return parse(line.strip())
        except EncodingError as e:
            print(f"{e}. Please try again.", file=sys.stderr)

def read_source(args, parse: Callable[[str], T], prompt: str, reader: TextIO) -> T:
    """Take the text from --text or --input if given, otherwise prompt on ``reader``."""
    if args.text is not None:
        return parse(args.text)
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                source_text = f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        return parse(source_text.strip())
    return process_input(prompt, parse, reader)

def read_key(args, cipher: CipherStrategy, reader: TextIO):
    if args.key is not None:
        return cipher.parse_key(args.key)
    return process_input("[CIPHER] Enter a key (a number from 0 to 25):", cipher.parse_key, reader)

# ==========================================
#  ACTIONS
# ==========================================

def list_ciphers():
    """Print all available ciphers and exit."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name in list_cipher_names():
        print(f"  {name:<12} {CIPHER_REGISTRY[name].description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")

def generate_key(cipher: CipherStrategy, rng: random.Random) -> str:
    key = cipher.generate_key(rng)
    print("[WARN] This prints your secret key. Do not save it in logs.", file=sys.stderr)
    return cipher.insecure_key_export(key)

def run_encrypt(args, cipher: CipherStrategy, reader: TextIO) -> str:
    message = read_source(args, cipher.parse_message, "[CIPHER] Enter the message to encrypt (letters a-z only):", reader)
    key = read_key(args, cipher, reader)
    log_info(f"Encrypting {len(message)} letter(s) with '{cipher.name}'.")
    return cipher.encrypt(message, key).render()

def run_decrypt(args, cipher: CipherStrategy, reader: TextIO) -> str:
    ciphertext = read_source(args, cipher.parse_ciphertext, "[CIPHER] Enter the ciphertext (letters only):", reader)
    key = read_key(args, cipher, reader)
    log_info(f"Decrypting {len(ciphertext)} letter(s) with '{cipher.name}'.")
    return cipher.decrypt(ciphertext, key).render()

def run_brute_force(args, cipher: CipherStrategy, reader: TextIO) -> str:
    if not hasattr(cipher, "brute_force"):
        sys.exit(f"Error: Cipher '{cipher.name}' does not support brute force.")
    ciphertext = read_source(args, cipher.parse_ciphertext, "[CIPHER] Enter the ciphertext (letters only):", reader)
    candidates = cipher.brute_force(ciphertext)
    log_info(f"Tried {len(candidates)} key(s).")
    return "\n".join(
        f"{cipher.insecure_key_export(key):>2}: {message.render()}" for key, message in candidates
    )

# ==========================================
#  CLI LOGIC
# ==========================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-engine",
        description="Classical Cipher Engine (Latin Shift Cipher)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<12}: {CIPHER_REGISTRY[k].description}" for k in list_cipher_names())

    parser.add_argument("-m", "--method", choices=list_cipher_names(), default=DEFAULT_METHOD,
                        help=f"Select cipher algorithm (default: {DEFAULT_METHOD}).\n{method_help}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-g", "--gen-key", action="store_true", help="Generate a random key")
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-b", "--brute-force", action="store_true",
                              help="Decrypt under every possible key")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-k", "--key", help="Key (prompted for on stdin if omitted)")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")

    return parser


def main(argv: Optional[list] = None, reader: Optional[TextIO] = None,
         rng: Optional[random.Random] = None) -> int:
    global VERBOSE

    args = build_parser().parse_args(argv)
    VERBOSE = args.verbose

    if args.list:
        list_ciphers()
        return 0

    if reader is None:
        reader = sys.stdin
    if rng is None:
        rng = random.SystemRandom()

    cipher = CIPHER_REGISTRY[args.method]

    try:
        if args.gen_key:
            result = generate_key(cipher, rng)
        elif args.encrypt:
            result = run_encrypt(args, cipher, reader)
        elif args.decrypt:
            result = run_decrypt(args, cipher, reader)
        else:
            result = run_brute_force(args, cipher, reader)
    except EncodingError as e:
        sys.exit(f"Error: {e}")
    except EOFError as e:
        sys.exit(f"Error: {e}")
    except KeyboardInterrupt:
        sys.exit(1)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Wrote result to {args.output}.")
    else:
        print(result)
    return 0
