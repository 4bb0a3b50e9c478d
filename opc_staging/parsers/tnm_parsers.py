"""AJCC 7th edition token parsers for T, N, and M categories."""

from typing import Any, ClassVar, Dict, Set

from opc_staging.parsers.base_parser import BaseCodeParser

T_IN_SITU = 'Tis'
N_UNKNOWN = 'NX'
M0 = 'M0'
M1 = 'M1'


class TNM_T_Parser(BaseCodeParser):
    """Parser for T category tokens."""

    AXIS: ClassVar[str] = 'T'
    FORMAT_MAP: ClassVar[Dict[str, Set[str]]] = {
        'T0': {'0'},
        'T1': {'1'},
        'T2': {'2'},
        'T3': {'3'},
        'T4': {'4'},
        'T4a': {'4a'},
        'T4b': {'4b'},
        T_IN_SITU: {'is', 'in situ'},
        'TX': {'x'},
    }
    SYNONYMS: ClassVar[Dict[str, Set[str]]] = {
        T_IN_SITU: {'CIS', 'carcinoma in situ', 'ca in situ'},
    }


class TNM_N_Parser(BaseCodeParser):
    """Parser for N category tokens."""

    AXIS: ClassVar[str] = 'N'
    FORMAT_MAP: ClassVar[Dict[str, Set[str]]] = {
        'N0': {'0'},
        'N1': {'1'},
        'N2': {'2'},
        'N2a': {'2a'},
        'N2b': {'2b'},
        'N2c': {'2c'},
        'N3': {'3'},
        N_UNKNOWN: {'x'},
    }
    SYNONYMS: ClassVar[Dict[str, Set[str]]] = {
        N_UNKNOWN: {'unknown', 'unk'},
    }

    def is_unknown(self, value: Any) -> bool:
        """Check whether a raw token states that node status is unknown."""
        return self.parse(value) == N_UNKNOWN


class TNM_M_Parser(BaseCodeParser):
    """Parser for M category tokens."""

    AXIS: ClassVar[str] = 'M'
    FORMAT_MAP: ClassVar[Dict[str, Set[str]]] = {
        M0: {'0'},
        M1: {'1'},
        'MX': {'x'},
    }

