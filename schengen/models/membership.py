"""Schengen Area membership tables.

Verify against the EU home affairs list before each release:
https://home-affairs.ec.europa.eu/policies/schengen-borders-and-visa/schengen-area_en
"""
import enum
from types import MappingProxyType

MEMBERSHIP_VERSION = "2025-01-07"


class CountryCategory(str, enum.Enum):
    schengen_member = "schengen_member"
    microstate = "microstate"  # open borders, counted as Schengen presence
    excluded = "excluded"  # known and explicitly outside Schengen (common confusion)
    other = "other"  # any other ISO 3166-1 country
    unknown = "unknown"


# code -> (name, member since)
SCHENGEN_MEMBERS = MappingProxyType({
    "AT": ("Austria", "1997-12-01"),
    "BE": ("Belgium", "1995-03-26"),
    "BG": ("Bulgaria", "2025-01-01"),
    "HR": ("Croatia", "2023-01-01"),
    "CZ": ("Czech Republic", "2007-12-21"),
    "DK": ("Denmark", "2001-03-25"),
    "EE": ("Estonia", "2007-12-21"),
    "FI": ("Finland", "2001-03-25"),
    "FR": ("France", "1995-03-26"),
    "DE": ("Germany", "1995-03-26"),
    "GR": ("Greece", "2000-01-01"),
    "HU": ("Hungary", "2007-12-21"),
    "IS": ("Iceland", "2001-03-25"),
    "IT": ("Italy", "1997-10-26"),
    "LV": ("Latvia", "2007-12-21"),
    "LI": ("Liechtenstein", "2011-12-19"),
    "LT": ("Lithuania", "2007-12-21"),
    "LU": ("Luxembourg", "1995-03-26"),
    "MT": ("Malta", "2007-12-21"),
    "NL": ("Netherlands", "1995-03-26"),
    "NO": ("Norway", "2001-03-25"),
    "PL": ("Poland", "2007-12-21"),
    "PT": ("Portugal", "1995-03-26"),
    "RO": ("Romania", "2025-01-01"),
    "SK": ("Slovakia", "2007-12-21"),
    "SI": ("Slovenia", "2007-12-21"),
    "ES": ("Spain", "1995-03-26"),
    "SE": ("Sweden", "2001-03-25"),
    "CH": ("Switzerland", "2008-12-12"),
})

# code -> (name, rationale)
SCHENGEN_MICROSTATES = MappingProxyType({
    "MC": ("Monaco", "Open border with France, no passport control"),
    "VA": ("Vatican City", "Open border with Italy, no passport control"),
    "SM": ("San Marino", "Open border with Italy, no passport control"),
    "AD": ("Andorra", "Open borders with France and Spain, no passport control"),
})

# code -> (name, reason)
EXCLUDED_COUNTRIES = MappingProxyType({
    "IE": ("Ireland", "EU member, opted out of Schengen"),
    "CY": ("Cyprus", "EU member, has not implemented Schengen"),
    "GB": ("United Kingdom", "Not EU, not Schengen"),
})

SCHENGEN_COUNTRY_CODES = frozenset(SCHENGEN_MEMBERS) | frozenset(SCHENGEN_MICROSTATES)
EXCLUDED_COUNTRY_CODES = frozenset(EXCLUDED_COUNTRIES)

# ISO 3166-1 alpha-2, officially assigned codes
ISO_COUNTRY_CODES = frozenset("""
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ
BA BB BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BV BW BY BZ
CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV CW CX CY CZ
DE DJ DK DM DO DZ
EC EE EG EH ER ES ET
FI FJ FK FM FO FR
GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY
HK HM HN HR HT HU
ID IE IL IM IN IO IQ IR IS IT
JE JM JO JP
KE KG KH KI KM KN KP KR KW KY KZ
LA LB LC LI LK LR LS LT LU LV LY
MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ
NA NC NE NF NG NI NL NO NP NR NU NZ
OM
PA PE PF PG PH PK PL PM PN PR PS PT PW PY
QA
RE RO RS RU RW
SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ
TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ
UA UG UM US UY UZ
VA VC VE VG VI VN VU
WF WS
YE YT
ZA ZM ZW
""".split())

_NAME_ALIASES = {
    # Official and common English variants
    "CZECHIA": "CZ",
    "CZECH": "CZ",
    "HOLLAND": "NL",
    "THE NETHERLANDS": "NL",
    "HELLENIC REPUBLIC": "GR",
    "SWISS CONFEDERATION": "CH",
    "REPUBLIC OF CROATIA": "HR",
    "REPUBLIC OF ESTONIA": "EE",
    "REPUBLIC OF FINLAND": "FI",
    "REPUBLIC OF LATVIA": "LV",
    "REPUBLIC OF LITHUANIA": "LT",
    "REPUBLIC OF MALTA": "MT",
    "REPUBLIC OF POLAND": "PL",
    "REPUBLIC OF SLOVENIA": "SI",
    "SLOVAK REPUBLIC": "SK",
    "KINGDOM OF BELGIUM": "BE",
    "KINGDOM OF DENMARK": "DK",
    "KINGDOM OF THE NETHERLANDS": "NL",
    "KINGDOM OF NORWAY": "NO",
    "KINGDOM OF SPAIN": "ES",
    "KINGDOM OF SWEDEN": "SE",
    "FRENCH REPUBLIC": "FR",
    "FEDERAL REPUBLIC OF GERMANY": "DE",
    "ITALIAN REPUBLIC": "IT",
    "PORTUGUESE REPUBLIC": "PT",
    "REPUBLIC OF AUSTRIA": "AT",
    "GRAND DUCHY OF LUXEMBOURG": "LU",
    "PRINCIPALITY OF LIECHTENSTEIN": "LI",
    "PRINCIPALITY OF MONACO": "MC",
    "PRINCIPALITY OF ANDORRA": "AD",
    "REPUBLIC OF SAN MARINO": "SM",
    "HOLY SEE": "VA",
    "VATICAN": "VA",
    "STATE OF VATICAN CITY": "VA",
    # French / German / Spanish
    "AUTRICHE": "AT", "ÖSTERREICH": "AT", "OSTERREICH": "AT",
    "BELGIQUE": "BE", "BELGIEN": "BE", "BÉLGICA": "BE", "BELGICA": "BE",
    "CROATIE": "HR", "KROATIEN": "HR", "CROACIA": "HR",
    "TCHÉQUIE": "CZ", "TCHEQUIE": "CZ", "TSCHECHIEN": "CZ", "CHEQUIA": "CZ",
    "DANEMARK": "DK", "DÄNEMARK": "DK", "DINAMARCA": "DK",
    "ESTONIE": "EE", "ESTLAND": "EE",
    "FINLANDE": "FI", "FINNLAND": "FI", "FINLANDIA": "FI",
    "FRANKREICH": "FR", "FRANCIA": "FR",
    "ALLEMAGNE": "DE", "DEUTSCHLAND": "DE", "ALEMANIA": "DE",
    "GRÈCE": "GR", "GRECE": "GR", "GRIECHENLAND": "GR", "GRECIA": "GR",
    "HONGRIE": "HU", "UNGARN": "HU", "HUNGRÍA": "HU", "HUNGRIA": "HU",
    "ISLANDE": "IS", "ISLAND": "IS", "ISLANDIA": "IS",
    "ITALIE": "IT", "ITALIEN": "IT", "ITALIA": "IT",
    "LETTONIE": "LV", "LETTLAND": "LV", "LETONIA": "LV",
    "LITUANIE": "LT", "LITAUEN": "LT", "LITUANIA": "LT",
    "LUXEMBURG": "LU", "LUXEMBURGO": "LU",
    "MALTE": "MT",
    "PAYS-BAS": "NL", "NIEDERLANDE": "NL", "PAÍSES BAJOS": "NL", "PAISES BAJOS": "NL",
    "NORVÈGE": "NO", "NORVEGE": "NO", "NORWEGEN": "NO", "NORUEGA": "NO",
    "POLOGNE": "PL", "POLEN": "PL", "POLONIA": "PL",
    "PORTUGALIA": "PT",
    "ROUMANIE": "RO", "RUMÄNIEN": "RO", "RUMANIEN": "RO", "RUMANIA": "RO", "RUMANÍA": "RO",
    "SLOVAQUIE": "SK", "SLOWAKEI": "SK", "ESLOVAQUIA": "SK",
    "SLOVÉNIE": "SI", "SLOVENIE": "SI", "SLOWENIEN": "SI", "ESLOVENIA": "SI",
    "ESPAGNE": "ES", "SPANIEN": "ES", "ESPAÑA": "ES", "ESPANA": "ES",
    "SUÈDE": "SE", "SUEDE": "SE", "SCHWEDEN": "SE", "SUECIA": "SE",
    "SUISSE": "CH", "SCHWEIZ": "CH", "SUIZA": "CH",
    "BULGARIE": "BG", "BULGARIEN": "BG",
    # Excluded countries
    "REPUBLIC OF IRELAND": "IE", "EIRE": "IE", "IRLANDE": "IE", "IRLAND": "IE", "IRLANDA": "IE",
    "REPUBLIC OF CYPRUS": "CY", "CHYPRE": "CY", "ZYPERN": "CY", "CHIPRE": "CY",
    "UK": "GB", "GREAT BRITAIN": "GB", "ENGLAND": "GB", "SCOTLAND": "GB", "WALES": "GB",
    "NORTHERN IRELAND": "GB", "ROYAUME-UNI": "GB", "ROYAUME UNI": "GB",
    "VEREINIGTES KÖNIGREICH": "GB", "GROSSBRITANNIEN": "GB", "REINO UNIDO": "GB",
    # Frequent non-Schengen destinations
    "UNITED STATES": "US", "UNITED STATES OF AMERICA": "US", "USA": "US",
    "CANADA": "CA", "MEXICO": "MX", "BRAZIL": "BR", "ARGENTINA": "AR",
    "AUSTRALIA": "AU", "NEW ZEALAND": "NZ", "JAPAN": "JP", "CHINA": "CN",
    "INDIA": "IN", "SINGAPORE": "SG", "SOUTH KOREA": "KR", "HONG KONG": "HK",
    "UNITED ARAB EMIRATES": "AE", "UAE": "AE", "SAUDI ARABIA": "SA", "QATAR": "QA",
    "ISRAEL": "IL", "TURKEY": "TR", "TÜRKIYE": "TR", "TURKIYE": "TR",
    "SOUTH AFRICA": "ZA", "EGYPT": "EG", "MOROCCO": "MA", "NIGERIA": "NG",
    "UKRAINE": "UA", "SERBIA": "RS", "ALBANIA": "AL", "MONTENEGRO": "ME",
    "NORTH MACEDONIA": "MK", "BOSNIA AND HERZEGOVINA": "BA", "MOLDOVA": "MD",
    "GEORGIA": "GE", "ARMENIA": "AM", "RUSSIA": "RU", "BELARUS": "BY",
}


def _build_name_index() -> MappingProxyType:
    index = {}
    for table in (SCHENGEN_MEMBERS, SCHENGEN_MICROSTATES, EXCLUDED_COUNTRIES):
        for code, row in table.items():
            index[row[0].upper()] = code
    index.update(_NAME_ALIASES)
    return MappingProxyType(index)


# Upper-cased name -> ISO code
COUNTRY_NAME_TO_CODE = _build_name_index()
