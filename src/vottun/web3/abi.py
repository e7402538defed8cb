"""
ABI helpers: canonical method signatures, selectors and call data.

ABI entries are the dicts found in a contract's JSON ABI, e.g.::

    {"type": "function", "name": "transfer",
     "inputs": [{"name": "to", "type": "address"},
                {"name": "amount", "type": "uint256"}]}
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from eth_abi import encode

from .errors import InvalidFormatError
from .hashing import keccak256


def json_method_to_string(entry: Mapping[str, Any]) -> str:
    """
    Build the canonical signature of an ABI entry.

    Args:
        entry: ABI function entry. A ``name`` that already contains ``(``
            is taken as a complete signature.

    Returns:
        Signature such as ``"transfer(address,uint256)"``
    """
    if not isinstance(entry, Mapping):
        raise InvalidFormatError("ABI entry must be a mapping")

    name = entry.get("name", "")
    if "(" in name[1:]:
        return name

    input_types = [inp["type"] for inp in entry.get("inputs", []) if "type" in inp]
    return f"{name}({','.join(input_types)})"


def function_selector(signature: str | Mapping[str, Any]) -> str:
    """First 4 bytes of ``keccak256(signature)``, ``0x``-prefixed."""
    if not isinstance(signature, str):
        signature = json_method_to_string(signature)
    return "0x" + keccak256(signature.encode("utf-8"))[:4].hex()


def encode_function_call(entry: Mapping[str, Any], args: Sequence[Any]) -> str:
    """
    ABI-encode a function call.

    Args:
        entry: ABI function entry
        args: Function arguments, in order

    Returns:
        0x-prefixed hex encoded calldata
    """
    try:
        input_types = [inp["type"] for inp in entry.get("inputs", [])]
    except (KeyError, TypeError):
        raise InvalidFormatError(f"Every input of {entry.get('name')} needs a type") from None
    if len(input_types) != len(args):
        raise InvalidFormatError(
            f"{entry.get('name')} expects {len(input_types)} arguments, got {len(args)}"
        )

    selector = function_selector(entry)
    encoded_args = encode(input_types, list(args)) if args else b""
    return selector + encoded_args.hex()
