"""Enumerations sent to the ThreatMetrix API.

Each member's value is its exact wire string.
"""

from enum import Enum


class ServiceType(str, Enum):
    """Restricts which output fields are returned for the API key's access level.

    The service type is linked to an API key and verified during a call.
    session-policy is the most common.
    """
    SESSION_POLICY = "session-policy"  # IP and device attributes plus policy details
    DEVICE = "device"                  # device attributes only
    DID = "did"                        # device identifier only
    IP = "ip"                          # IP attributes only
    SESSION = "session"                # device attributes, no IP or policy
    ALL = "All"                        # almost everything
    THREE_DS = "3ds"

    def __str__(self) -> str:
        return self.value


class EventType(str, Enum):
    """Type of transaction or event being scored."""
    LOGIN = "LOGIN"
    PAYMENT = "PAYMENT"
    ACCOUNT_CREATION = "ACCOUNT_CREATION"
    TRANSFER = "TRANSFER"
    TRANSACTION_OTHER = "TRANSACTION_OTHER"
    AUCTION_BID = "AUCTION_BID"
    DETAILS_CHANGE = "DETAILS_CHANGE"
    ADD_LISTING = "ADD_LISTING"
    ACCOUNT_BALANCE = "ACCOUNT_BALANCE"
    TRANSACTION_HISTORY = "TRANSACTION_HISTORY"
    DIGITAL_DOWNLOAD = "DIGITAL_DOWNLOAD"
    DIGITAL_STREAM = "DIGITAL_STREAM"
    FAILED_LOGIN = "FAILED_LOGIN"
    DEPOSIT = "DEPOSIT"
    LOAN_ACCEPTANCE = "LOAN_ACCEPTANCE"
    CUSTOM_EVENT_TYPE = "CUSTOM_EVENT_TYPE"
    DEVICE_REGISTRATION = "DEVICE_REGISTRATION"
    AUTH_TOKEN = "AUTH_TOKEN"
    PASSWORD_RESET = "PASSWORD_RESET"
    INIT_AUTH = "INIT_AUTH"
    PRE_AUTHENTICATION = "PRE_AUTHENTICATION"
    ADD_PAYMENT_INSTRUMENT = "ADD_PAYMENT_INSTRUMENT"
    MANAGE_PAYMENT_INSTRUMENT = "MANAGE_PAYMENT_INSTRUMENT"
    VERIFY_PAYMENT_INSTRUMENT = "VERIFY_PAYMENT_INSTRUMENT"

    def __str__(self) -> str:
        return self.value


class FinalReviewStatus(str, Enum):
    """New review status a transaction should be updated to."""
    NONE = "none"
    PASS = "pass"
    REVIEW = "review"
    REJECT = "reject"

    def __str__(self) -> str:
        return self.value


class TrustTagName(str, Enum):
    """Predefined global trust tags."""
    NONE = "NONE"
    LOGIN_PASSED = "_LOGIN_PASSED"
    LOGIN_FAILED = "_LOGIN_FAILED"
    AUTH_PASSED = "_AUTH_PASSED"
    AUTH_FAILED = "_AUTH_FAILED"
    ACCEPTED = "_ACCEPTED"
    REJECTED = "_REJECTED"
    FALSE_POSITIVE = "_FALSE_POSITIVE"
    FALSE_NEGATIVE = "_FALSE_NEGATIVE"
    REVIEWED = "_REVIEWED"
    REVIEW_PASSED = "_REVIEW_PASSED"
    REVIEW_FAILED = "_REVIEW_FAILED"
    CHALLENGED = "_CHALLENGED"
    CHALLENGE_FAILED = "_CHALLENGE_FAILED"
    CHALLENGE_PASSED = "_CHALLENGE_PASSED"
    FRAUD_PAYMENT = "_FRAUD_PAYMENT"
    FRAUD_IDENTITY = "_FRAUD_IDENTITY"
    FRAUD_BREACH = "_FRAUD_BREACH"
    FRAUD_MONEY_LAUNDERING = "_FRAUD_MONEY_LAUNDERING"
    FRAUD_MONEY_TRANSFER = "_FRAUD_MONEY_TRANSFER"
    FRAUD_INTERNAL = "_FRAUD_INTERNAL"
    FRAUD_MOTO = "_FRAUD_MOTO"
    WATCH = "_WATCH"
    COMPROMISED = "_COMPROMISED"
    TRUSTED = "_TRUSTED"
    PRIVILEGED = "_PRIVILEGED"
    THREAT = "_THREAT"
    LOCK = "_LOCK"
    SELF_EXCLUDED = "_SELF_EXCLUDED"
    FRAUD_CONF = "_FRAUD_CONF"
    FRAUD_PROB = "_FRAUD_PROB"
    TRUSTED_CONF = "_TRUSTED_CONF"
    TRUSTED_PROB = "_TRUSTED_PROB"
    LOAN_APP = "_LOAN_APP"
    LOAN_FUND = "_LOAN_FUND"
    LOAN_DEPOSIT = "_LOAN_DEPOSIT"

    def __str__(self) -> str:
        return self.value


class TrustTagContext(str, Enum):
    """Predefined trust tag contexts. Mandatory when a tag name is sent.

    Prefixes: _A_ authentication method, _I_ industry, _P_ payment,
    _T_ threat.
    """
    NONE = "NONE"
    A_CAPCH = "_A_CAPCH"
    A_URPWD = "_A_URPWD"
    A_BANK = "_A_BANK"
    A_SMS = "_A_SMS"
    A_VOICE = "_A_VOICE"
    A_OTPS = "_A_OTPS"
    A_OTPH = "_A_OTPH"
    A_KBAMN = "_A_KBAMN"
    A_KBAAV = "_A_KBAAV"
    A_KBAMX = "_A_KBAMX"
    A_BIOV = "_A_BIOV"
    A_BIOF = "_A_BIOF"
    A_BIO = "_A_BIO"
    A_DOCUM = "_A_DOCUM"
    A_EMAIL = "_A_EMAIL"
    A_ADDRS = "_A_ADDRS"
    A_CELL = "_A_CELL"
    A_IDVER = "_A_IDVER"
    A_ANLYS = "_A_ANLYS"
    A_PAYMT = "_A_PAYMT"
    A_SOC = "_A_SOC"
    A_GEO = "_A_GEO"
    I_BANK = "_I_BANK"
    I_BROK = "_I_BROK"
    I_NBFI = "_I_NBFI"
    I_TELC = "_I_TELC"
    I_UTIL = "_I_UTIL"
    I_RESO = "_I_RESO"
    I_SOCL = "_I_SOCL"
    I_TRVL = "_I_TRVL"
    I_ACCOM = "_I_ACCOM"
    I_GAME = "_I_GAME"
    I_DIGT = "_I_DIGT"
    I_AUCT = "_I_AUCT"
    I_CLSFD = "_I_CLSFD"
    I_MRKT = "_I_MRKT"
    I_ACCT = "_I_ACCT"
    I_LEGAL = "_I_LEGAL"
    I_HLTH = "_I_HLTH"
    I_SAAS = "_I_SAAS"
    I_GOV = "_I_GOV"
    I_EDU = "_I_EDU"
    P_ADDR = "_P_ADDR"
    P_CARD = "_P_CARD"
    P_FUNDS = "_P_FUNDS"
    T_TOR = "_T_TOR"
    T_BOT = "_T_BOT"
    T_IPADD = "_T_IPADD"
    T_GEOSP = "_T_GEOSP"
    T_IDSPF = "_T_IDSPF"
    T_DIDSP = "_T_DIDSP"
    T_MALW = "_T_MALW"
    T_MITM = "_T_MITM"

    def __str__(self) -> str:
        return self.value
