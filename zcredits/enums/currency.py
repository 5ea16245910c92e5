from enum import Enum


class CurrencyEnum(str, Enum):
    PKR = 'PKR'
    ZC = 'ZC'


class AmountKindEnum(str, Enum):
    ZCREDS = 'zcreds'
    PKR = 'pkr'
