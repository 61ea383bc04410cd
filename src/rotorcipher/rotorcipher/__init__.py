from rotorcipher.core.errors import InvalidSymbolError, InvalidWiringError
from rotorcipher.machine import Enigma, EnigmaConfig, enigma_decrypt, enigma_encrypt
from rotorcipher.wiring import Permutation, Reflector, Rotor

__all__ = [
    'Enigma',
    'EnigmaConfig',
    'enigma_encrypt',
    'enigma_decrypt',
    'Permutation',
    'Rotor',
    'Reflector',
    'InvalidSymbolError',
    'InvalidWiringError',
]
