"""Wire types shared by the Stripe resource models."""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar

from pydantic import (
  BaseModel,
  BeforeValidator,
  ConfigDict,
  PlainSerializer,
  model_serializer,
)


def from_epoch_seconds(value: Any) -> Any:
  """Convert integer seconds since the epoch into an aware UTC datetime."""
  if isinstance(value, datetime):
    return value
  if isinstance(value, bool) or not isinstance(value, int):
    raise ValueError("expected integer seconds since epoch")
  return datetime.fromtimestamp(value, tz=timezone.utc)


def to_epoch_seconds(value: datetime) -> int:
  """Convert a datetime back to integer seconds; naive values are taken as UTC."""
  if value.tzinfo is None:
    value = value.replace(tzinfo=timezone.utc)
  return int(value.timestamp())


def decimal_to_json(value: Decimal) -> int | float | str:
  """
  JSON form of an amount that decodes back to the same Decimal.

  Whole amounts become ints and short fractions become floats. Anything a
  double cannot hold exactly is written as its decimal string.
  """
  if value == value.to_integral_value():
    return int(value)
  as_float = float(value)
  if Decimal(repr(as_float)) == value:
    return as_float
  return str(value)


def empty_if_null(value: Any) -> Any:
  """Missing, null and {} metadata all decode to the same empty mapping."""
  if value is None:
    return {}
  return value


Timestamp = Annotated[
  datetime,
  BeforeValidator(from_epoch_seconds),
  PlainSerializer(to_epoch_seconds, return_type=int),
]

Amount = Annotated[
  Decimal,
  PlainSerializer(decimal_to_json, when_used="json"),
]

Metadata = Annotated[dict[str, str], BeforeValidator(empty_if_null)]


class Currency(str, Enum):
  """ISO 4217 currency codes accepted by Stripe, in their lowercase wire form."""

  AED = "aed"
  AFN = "afn"
  ALL = "all"
  AMD = "amd"
  ANG = "ang"
  AOA = "aoa"
  ARS = "ars"
  AUD = "aud"
  AWG = "awg"
  AZN = "azn"
  BAM = "bam"
  BBD = "bbd"
  BDT = "bdt"
  BGN = "bgn"
  BIF = "bif"
  BMD = "bmd"
  BND = "bnd"
  BOB = "bob"
  BRL = "brl"
  BSD = "bsd"
  BWP = "bwp"
  BYN = "byn"
  BZD = "bzd"
  CAD = "cad"
  CDF = "cdf"
  CHF = "chf"
  CLP = "clp"
  CNY = "cny"
  COP = "cop"
  CRC = "crc"
  CVE = "cve"
  CZK = "czk"
  DJF = "djf"
  DKK = "dkk"
  DOP = "dop"
  DZD = "dzd"
  EGP = "egp"
  ETB = "etb"
  EUR = "eur"
  FJD = "fjd"
  FKP = "fkp"
  GBP = "gbp"
  GEL = "gel"
  GIP = "gip"
  GMD = "gmd"
  GNF = "gnf"
  GTQ = "gtq"
  GYD = "gyd"
  HKD = "hkd"
  HNL = "hnl"
  HRK = "hrk"
  HTG = "htg"
  HUF = "huf"
  IDR = "idr"
  ILS = "ils"
  INR = "inr"
  ISK = "isk"
  JMD = "jmd"
  JPY = "jpy"
  KES = "kes"
  KGS = "kgs"
  KHR = "khr"
  KMF = "kmf"
  KRW = "krw"
  KYD = "kyd"
  KZT = "kzt"
  LAK = "lak"
  LBP = "lbp"
  LKR = "lkr"
  LRD = "lrd"
  LSL = "lsl"
  MAD = "mad"
  MDL = "mdl"
  MGA = "mga"
  MKD = "mkd"
  MMK = "mmk"
  MNT = "mnt"
  MOP = "mop"
  MRO = "mro"
  MUR = "mur"
  MVR = "mvr"
  MWK = "mwk"
  MXN = "mxn"
  MYR = "myr"
  MZN = "mzn"
  NAD = "nad"
  NGN = "ngn"
  NIO = "nio"
  NOK = "nok"
  NPR = "npr"
  NZD = "nzd"
  PAB = "pab"
  PEN = "pen"
  PGK = "pgk"
  PHP = "php"
  PKR = "pkr"
  PLN = "pln"
  PYG = "pyg"
  QAR = "qar"
  RON = "ron"
  RSD = "rsd"
  RUB = "rub"
  RWF = "rwf"
  SAR = "sar"
  SBD = "sbd"
  SCR = "scr"
  SEK = "sek"
  SGD = "sgd"
  SHP = "shp"
  SLE = "sle"
  SLL = "sll"
  SOS = "sos"
  SRD = "srd"
  STD = "std"
  SVC = "svc"
  SZL = "szl"
  THB = "thb"
  TJS = "tjs"
  TOP = "top"
  TRY = "try"
  TTD = "ttd"
  TWD = "twd"
  TZS = "tzs"
  UAH = "uah"
  UGX = "ugx"
  USD = "usd"
  UYU = "uyu"
  UZS = "uzs"
  VND = "vnd"
  VUV = "vuv"
  WST = "wst"
  XAF = "xaf"
  XCD = "xcd"
  XOF = "xof"
  XPF = "xpf"
  YER = "yer"
  ZAR = "zar"
  ZMW = "zmw"

  @classmethod
  def _missing_(cls, value):
    if isinstance(value, str):
      lowered = value.lower()
      for member in cls:
        if member.value == lowered:
          return member
    return None

  @property
  def iso(self) -> str:
    return self.value.upper()


class StripeObject(BaseModel):
  """
  Base for immutable Stripe resources.

  Subclasses that set `object_name` get an `"object"` discriminator key in
  their serialized form, the way the API itself renders them.
  """

  model_config = ConfigDict(frozen=True)

  object_name: ClassVar[str | None] = None

  @model_serializer(mode="wrap")
  def _serialize_with_object(self, handler) -> dict[str, Any]:
    data = handler(self)
    if self.object_name is None:
      return data
    return {"object": self.object_name, **data}
