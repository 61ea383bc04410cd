import argparse
import logging
from typing import Optional, Sequence

from rotorcipher.machine import Enigma

helptext = """
Builds a random two-rotor machine, copies it into a decoder,
encodes a message and decodes it again.

Examples:
    python -m rotorcipher
    python -m rotorcipher --seed 17 --window CQ HELLO
"""


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="python -m rotorcipher",
        description=helptext,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("message", nargs="?", default="ABC", help="Uppercase letters to encode (default ABC)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible wiring")
    parser.add_argument("--window", help="Two window letters, right rotor first (e.g. CQ)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log rotor stepping")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        encoder = Enigma.random(rng=args.seed, initial_window=args.window)
        decoder = Enigma.from_machine(encoder)
        ciphertext = encoder.encrypt(args.message)
    except ValueError as e:
        parser.error(str(e))

    print(ciphertext)
    print(decoder.decrypt(ciphertext))


if __name__ == "__main__":
    main()
