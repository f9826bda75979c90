import argparse
import logging
import os
import sys
import time

from Crypto.Hash import keccak

from .CryptoFunc import encode_signal
from .Keccak256 import keccak256

logger = logging.getLogger(__name__)


def parse_kat_file(filepath):
    """
    Parses a Keccak team KAT file (ShortMsgKAT_256.txt layout).

    Lines look like "Len = 8", "Msg = CC", "MD = EEAD...". Values with the
    same key are collected into lists in file order; Len becomes an int,
    everything else is decoded from hex.

    Args:
        filepath (str): The path to the file to be parsed.

    Returns:
        dict: Keys 'Len', 'Msg', 'MD' mapped to lists of values.
              Returns an empty dictionary if the file cannot be read.
    """
    data = {}
    try:
        with open(filepath, 'r') as f:
            for line in f:
                if '=' not in line or line.lstrip().startswith('#'):
                    continue
                key, value = line.split('=', 1)
                key = key.strip()
                value = value.strip()

                if key == 'Len':
                    try:
                        parsed = int(value)
                    except ValueError:
                        print(f"Warning: Could not parse length '{value}'. Skipping.")
                        continue
                else:
                    try:
                        parsed = bytes.fromhex(value)
                    except ValueError:
                        print(f"Warning: Could not decode hex value for key '{key}'. Skipping.")
                        continue

                data.setdefault(key, []).append(parsed)
    except OSError as e:
        print(f"Error: Could not read '{filepath}': {e}")

    return data


def TC_KAT(parsed_data: dict) -> list[int]:
    """
    Check every byte-aligned vector of a parsed KAT file.

    Returns:
        The bit lengths of the vectors that did not match.
    """
    lengths = parsed_data.get('Len', [])
    messages = parsed_data.get('Msg', [])
    digests = parsed_data.get('MD', [])

    failed = []
    checked = 0
    for bit_len, msg, md in zip(lengths, messages, digests):
        if bit_len % 8 != 0:
            continue
        # Len = 0 is written as "Msg = 00"
        message = msg[: bit_len // 8]
        if keccak256(message) != md:
            failed.append(bit_len)
        checked += 1

    logger.debug("checked %d KAT vector(s), %d failed", checked, len(failed))
    if not failed:
        print(f"✅KAT passed all {checked} Testcases!")
    else:
        print(f"❌KAT failed for Len = {', '.join(str(n) for n in failed)}")
    return failed


def TC_CrossCheck(n: int, max_len: int = 3 * 136) -> int:
    """
    Compare against pycryptodome on n random messages.

    Returns:
        The number of mismatching messages.
    """
    mismatches = 0
    for _ in range(n):
        length = int.from_bytes(os.urandom(2), 'little') % (max_len + 1)
        message = os.urandom(length)
        expected = keccak.new(digest_bits=256, data=message).digest()
        if keccak256(message) != expected:
            logger.debug("mismatch at length %d: %s", length, message.hex())
            mismatches += 1

    if mismatches == 0:
        print(f"✅Cross-check passed all {n} Testcases!")
    else:
        print(f"❌Cross-check failed {mismatches} of {n} Testcases!")
    return mismatches


def run_Benchmark(n: int, message_len: int = 1024) -> float:
    """
    Time n hashes of a fixed message and print the average.

    The first call is made before timing starts since numba compiles the
    permutation on first use.
    """
    message = bytes(i % 256 for i in range(message_len))
    keccak256(message)

    total_elapsed = 0.0
    for i in range(n):
        start = time.perf_counter()
        keccak256(message)
        end = time.perf_counter()
        total_elapsed += end - start
        logger.debug("Round %d: %.6f ms", i + 1, (end - start) * 1000)

    average = total_elapsed / n if n else 0.0
    print(f"keccak256() took averagely {average * 1000:.6f} ms for {message_len} bytes.")
    return average


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keccak-256 (Ethereum) hashing")
    parser.add_argument("messages", nargs="*",
                        help="messages to hash (UTF-8 unless --hex is given)")
    parser.add_argument("--hex", action="store_true",
                        help="treat messages as hex strings")
    parser.add_argument("--file", action="append", default=[],
                        help="hash the contents of a file (repeatable)")
    parser.add_argument("--signal", action="store_true",
                        help="print the encoded signal instead of the digest")
    parser.add_argument("--kat", help="run a Known-Answer-Test file")
    parser.add_argument("--crosscheck", type=int, metavar="N",
                        help="compare N random messages against pycryptodome")
    parser.add_argument("--benchmark", type=int, metavar="N",
                        help="time N hashes of a 1 KiB message")
    parser.add_argument("--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(message)s",
    )

    status = 0

    for text in args.messages:
        if args.signal:
            print(f"encode_signal({text!r}) = {encode_signal(text)}")
            continue
        if args.hex:
            try:
                message = bytes.fromhex(text)
            except ValueError:
                parser.error(f"not a hex string: {text!r}")
        else:
            message = text.encode('utf-8')
        print(f"keccak256({text!r}) = {keccak256(message).hex()}")

    for path in args.file:
        with open(path, 'rb') as f:
            message = f.read()
        print(f"keccak256({path}) = {keccak256(message).hex()}")

    if args.kat:
        parsed_data = parse_kat_file(args.kat)
        if not parsed_data.get('MD'):
            print(f"Error: no test vectors found in '{args.kat}'")
            status = 1
        elif TC_KAT(parsed_data):
            status = 1

    if args.crosscheck:
        if TC_CrossCheck(args.crosscheck):
            status = 1

    if args.benchmark:
        run_Benchmark(args.benchmark)

    return status


if __name__ == "__main__":
    sys.exit(main())
