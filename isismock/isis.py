"""Fixed-layout IS-IS headers and TLVs, encoded byte for byte."""

from __future__ import annotations

import enum
from typing import Any, ClassVar

__all__ = [
    "ALL_ISS",
    "OUR_MAC",
    "EXTENDED_CIRCUIT_ID",
    "START_LSP_ID",
    "END_LSP_ID",
    "Level",
    "PacketType",
    "AdjacencyState",
    "Block",
    "IsisHeader",
    "HelloHeader",
    "PsnpHeader",
    "CsnpHeader",
    "LspHeader",
    "EthHeader",
    "Tlv240",
    "Tlv240Ext",
    "Tlv129",
    "Tlv132",
    "Tlv9",
    "LspEntry",
    "Tlv137",
    "Tlv14",
    "Tlv129Ext",
    "Tlv134",
    "Tlv232",
    "Tlv242",
    "Tlv1Ext",
    "Tlv229",
    "Tlv229Topology",
]

ALL_ISS = bytes([0x09, 0x00, 0x2B, 0x00, 0x00, 0x05])
OUR_MAC = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])
EXTENDED_CIRCUIT_ID = bytes([0x00, 0x00, 0x00, 0x01])
START_LSP_ID = bytes(8)
END_LSP_ID = bytes([0xFF] * 8)


class Level(enum.IntEnum):
    L1 = 0x1
    L2 = 0x2
    L12 = 0x3


class PacketType(enum.IntEnum):
    P2P_HELLO = 17
    L2_LSP = 20
    L2_CSNP = 25
    L2_PSNP = 27


class AdjacencyState(enum.IntEnum):
    DOWN = 2
    INIT = 1
    UP = 0


class _Field:
    """Descriptor over a slice of a block's bytes."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return self.read(obj._rep)

    def __set__(self, obj: Any, value: Any) -> None:
        self.write(obj._rep, value)

    def read(self, rep: bytearray) -> Any:
        raise NotImplementedError

    def write(self, rep: bytearray, value: Any) -> None:
        raise NotImplementedError


class _U8(_Field):
    def __init__(self, offset: int, maximum: int = 0xFF) -> None:
        self.offset = offset
        self.maximum = maximum

    def read(self, rep: bytearray) -> int:
        return rep[self.offset]

    def write(self, rep: bytearray, value: int) -> None:
        value = int(value)
        if not 0 <= value <= self.maximum:
            raise ValueError(f"{self.name} must be in 0..{self.maximum}, got {value}")
        rep[self.offset] = value


class _U16(_Field):
    def __init__(self, offset: int, byteorder: str = "big") -> None:
        self.offset = offset
        self.byteorder = byteorder

    def read(self, rep: bytearray) -> int:
        return int.from_bytes(rep[self.offset:self.offset + 2], self.byteorder)

    def write(self, rep: bytearray, value: int) -> None:
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{self.name} must be in 0..65535, got {value}")
        rep[self.offset:self.offset + 2] = value.to_bytes(2, self.byteorder)


class _Bytes(_Field):
    """A run of raw bytes; writes past the end of the block are dropped."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length

    def read(self, rep: bytearray) -> bytes:
        return bytes(rep[self.offset:self.offset + self.length])

    def write(self, rep: bytearray, value: bytes) -> None:
        value = bytes(value)
        if len(value) != self.length:
            raise ValueError(f"{self.name} takes {self.length} bytes, got {len(value)}")
        end = min(self.offset + self.length, len(rep))
        rep[self.offset:end] = value[:end - self.offset]


class Block:
    """A fixed-size record that is sent and received as raw bytes.

    Keyword arguments given to the constructor set fields after the defaults.
    """

    SIZE: ClassVar[int] = 0

    def __init__(self, **fields: Any) -> None:
        self._rep = bytearray(self.SIZE)
        self._set_defaults()
        for name, value in fields.items():
            attr = getattr(type(self), name, None)
            if name.startswith("_") or not isinstance(attr, (_Field, property)):
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, value)

    def _set_defaults(self) -> None:
        pass

    def __len__(self) -> int:
        return self.SIZE

    def to_bytes(self) -> bytes:
        """Return the bytes this block puts on the wire."""
        return bytes(self._rep[:len(self)])

    __bytes__ = to_bytes

    @classmethod
    def _wire_length(cls, data: bytes) -> int:
        return cls.SIZE

    @classmethod
    def from_bytes(cls, data: bytes) -> "Block":
        """Read a block from the start of ``data``; trailing bytes are ignored."""
        data = bytes(data)
        length = cls._wire_length(data)
        if len(data) < length:
            raise ValueError(f"{cls.__name__} needs {length} bytes, got {len(data)}")
        block = cls()
        block._rep[:length] = data[:length]
        return block

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_bytes().hex()})"


class _VariableBlock(Block):
    """A TLV whose wire length is its length byte plus two."""

    def __len__(self) -> int:
        return self._rep[1] + 2

    @classmethod
    def _wire_length(cls, data: bytes) -> int:
        if len(data) < 2:
            raise ValueError(f"{cls.__name__} needs at least 2 bytes")
        length = data[1] + 2
        if length > cls.SIZE:
            raise ValueError(f"{cls.__name__} length {data[1]} exceeds capacity {cls.SIZE - 2}")
        return length


class IsisHeader(Block):
    """Common IS-IS PDU header."""

    SIZE = 8
    irpd = _U8(0)
    length_indicator = _U8(1)
    version_id = _U8(2)
    pdu_type = _U8(4)
    version = _U8(5)

    def _set_defaults(self) -> None:
        self.irpd = 0x83
        self.version_id = 1
        self.version = 1


class HelloHeader(Block):
    """Point-to-point hello header."""

    SIZE = 12
    circuit_type = _U8(0)
    system_id = _Bytes(1, 6)
    holding_timer = _U16(7)
    pdu_length = _U16(9)
    local_circuit_id = _U8(11)

    def _set_defaults(self) -> None:
        self.circuit_type = Level.L2
        self.holding_timer = 30


class PsnpHeader(Block):
    """Partial sequence numbers PDU header."""

    SIZE = 9
    pdu_length = _U16(0)
    source_id = _Bytes(2, 6)
    system_id = source_id


class CsnpHeader(Block):
    """Complete sequence numbers PDU header."""

    SIZE = 25
    pdu_length = _U16(0)
    source_id = _Bytes(2, 7)
    start_lsp_id = _Bytes(9, 8)
    end_lsp_id = _Bytes(18, 8)

    def _set_defaults(self) -> None:
        self.start_lsp_id = START_LSP_ID
        self.end_lsp_id = END_LSP_ID


class LspHeader(Block):
    """Link state PDU header; its 16-bit fields are stored low byte first."""

    SIZE = 19
    pdu_length = _U16(0, "little")
    remaining_lifetime = _U16(2, "little")
    lsp_id = _Bytes(4, 8)
    sequence_num = _Bytes(12, 4)
    checksum = _U16(16, "little")
    type_block = _U8(18)

    def _set_defaults(self) -> None:
        self.type_block = 0x3

    @property
    def psnp_entry(self) -> bytes:
        """Lifetime, LSP id, sequence number and checksum, as a PSNP entry."""
        return bytes(self._rep[2:18])


class EthHeader(Block):
    """802.3 header with LLC fields filled with their IS-IS defaults."""

    SIZE = 17
    destination = _Bytes(0, 6)
    dmac = destination
    source = _Bytes(6, 6)
    length = _U16(12)
    dsap = _U8(14)
    ssap = _U8(15)
    control_field = _U8(16)

    def _set_defaults(self) -> None:
        self.destination = ALL_ISS
        self.source = OUR_MAC
        self.dsap = 0xFE
        self.ssap = 0xFE
        self.control_field = 0x03


class Tlv240(Block):
    """Point-to-point adjacency state."""

    SIZE = 7
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    adjacency_state = _U8(2)
    ext_local_circuit_id = _Bytes(3, 4)

    def _set_defaults(self) -> None:
        self.tlv_type = 240
        self.tlv_length = 5
        self.adjacency_state = AdjacencyState.DOWN
        self.ext_local_circuit_id = EXTENDED_CIRCUIT_ID


class Tlv240Ext(Block):
    """Point-to-point adjacency state with neighbour information."""

    SIZE = 17
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    adjacency_state = _U8(2)
    ext_local_circuit_id = _Bytes(3, 4)
    neighbor_sysid = _Bytes(7, 6)
    ext_neighbor_local_circuit_id = _Bytes(13, 4)

    def _set_defaults(self) -> None:
        self.tlv_type = 240
        self.tlv_length = 15
        self.adjacency_state = AdjacencyState.INIT


class Tlv129(Block):
    """Protocols supported, with a single NLPID."""

    SIZE = 3
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    nlpid = _U8(2)

    def _set_defaults(self) -> None:
        self.tlv_type = 129
        self.tlv_length = 1
        self.nlpid = 0xCC


class Tlv132(Block):
    """IPv4 interface address."""

    SIZE = 6
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    ip_address = _Bytes(2, 4)

    def _set_defaults(self) -> None:
        self.tlv_type = 132
        self.tlv_length = 4


class Tlv9(Block):
    """LSP entries header; the entries follow it."""

    SIZE = 2
    tlv_type = _U8(0)
    tlv_length = _U8(1)

    def _set_defaults(self) -> None:
        self.tlv_type = 9


class LspEntry(Block):
    """One LSP entry of a TLV 9."""

    SIZE = 16
    entry = _Bytes(0, 16)
    lsp_id = _Bytes(2, 8)


class Tlv137(_VariableBlock):
    """Dynamic hostname."""

    SIZE = 257
    tlv_type = _U8(0)
    tlv_length = _U8(1)

    def _set_defaults(self) -> None:
        self.tlv_type = 137

    @property
    def hostname(self) -> str:
        """The name within the current TLV length."""
        return bytes(self._rep[2:2 + self._rep[1]]).decode("latin-1")

    @hostname.setter
    def hostname(self, name: str) -> None:
        raw = name.encode("latin-1")
        if len(raw) > self.SIZE - 2:
            raise ValueError(f"hostname longer than {self.SIZE - 2} bytes")
        self._rep[2:2 + len(raw)] = raw

    def data(self) -> bytes:
        """Return the whole TLV as sent."""
        return self.to_bytes()


class Tlv14(Block):
    """Originating buffer size; the size is stored low byte first."""

    SIZE = 4
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    size = _U16(2, "little")

    def _set_defaults(self) -> None:
        self.tlv_type = 14
        self.tlv_length = 2


class Tlv129Ext(_VariableBlock):
    """Protocols supported, with up to three NLPIDs."""

    SIZE = 5
    tlv_type = _U8(0)
    tlv_length = _U8(1, maximum=3)

    def _set_defaults(self) -> None:
        self.tlv_type = 129

    def set_nlpid(self, value: int, index: int) -> None:
        """Store ``value`` as NLPID number ``index``; indexes above 2 are ignored."""
        if 0 <= index <= 2:
            if not 0 <= value <= 0xFF:
                raise ValueError(f"nlpid must be in 0..255, got {value}")
            self._rep[index + 2] = value

    @property
    def nlpids(self) -> bytes:
        """The NLPIDs within the current TLV length."""
        return bytes(self._rep[2:2 + self._rep[1]])


class Tlv134(Block):
    """Traffic engineering router id."""

    SIZE = 6
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    ip_address = _Bytes(2, 4)

    def _set_defaults(self) -> None:
        self.tlv_type = 134
        self.tlv_length = 4


class Tlv232(Block):
    """IPv6 interface address."""

    SIZE = 18
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    ip_address = _Bytes(2, 16)

    def _set_defaults(self) -> None:
        self.tlv_type = 232
        self.tlv_length = 16


class Tlv242(Block):
    """Router capability."""

    SIZE = 7
    tlv_type = _U8(0)
    tlv_length = _U8(1)
    router_id = _Bytes(2, 4)
    flags = _U8(6)

    def _set_defaults(self) -> None:
        self.tlv_type = 242
        self.tlv_length = 5


class Tlv1Ext(_VariableBlock):
    """Area addresses with a single area."""

    SIZE = 16
    tlv_type = _U8(0)
    tlv_length = _U8(1, maximum=14)
    area_length = _U8(2)

    def _set_defaults(self) -> None:
        self.tlv_type = 1

    @property
    def area(self) -> bytes:
        """The area address within the current area length."""
        return bytes(self._rep[3:3 + self._rep[2]])

    @area.setter
    def area(self, value: bytes) -> None:
        value = bytes(value)
        if len(value) > self.SIZE - 3:
            raise ValueError(f"area longer than {self.SIZE - 3} bytes")
        self._rep[3:3 + len(value)] = value


class Tlv229(Block):
    """Multi-topology header; the topologies follow it."""

    SIZE = 2
    tlv_type = _U8(0)
    tlv_length = _U8(1)

    def _set_defaults(self) -> None:
        self.tlv_type = 229


class Tlv229Topology(Block):
    """One topology entry of a TLV 229."""

    SIZE = 2
    topology = _U16(0)