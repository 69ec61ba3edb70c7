# Generated by `python -m isocurrency.codegen` from isodata.tsv. Do not edit.
"""ISO 4217 currency enumeration.

One member per row of the source table. Edit the table, then regenerate:

    python -m isocurrency.codegen

Python 3.13+.
"""

from isocurrency.currency import CurrencyEnum
from isocurrency.record import CurrencyRecord

__all__ = ["Currency"]


class Currency(CurrencyEnum):
    """ISO 4217 currency.

    Members are named by alphabetic code and compare equal to it:

        >>> Currency.EUR == "EUR"
        True
        >>> Currency.from_numeric(978) is Currency.EUR
        True
    """

    AED = CurrencyRecord("AED", 784, "United Arab Emirates dirham", symbol="د.إ", exponent=2, territories=("AE",))
    """United Arab Emirates dirham"""

    AFN = CurrencyRecord("AFN", 971, "Afghan afghani", symbol="؋", exponent=2, territories=("AF",))
    """Afghan afghani"""

    ALL = CurrencyRecord("ALL", 8, "Albanian lek", symbol="L", exponent=2, territories=("AL",))
    """Albanian lek"""

    AMD = CurrencyRecord("AMD", 51, "Armenian dram", symbol="֏", exponent=2, territories=("AM",))
    """Armenian dram"""

    ANG = CurrencyRecord("ANG", 532, "Netherlands Antillean guilder", symbol="ƒ", exponent=2, territories=("CW", "SX"), subunit_symbol="c")
    """Netherlands Antillean guilder"""

    AOA = CurrencyRecord("AOA", 973, "Angolan kwanza", symbol="Kz", exponent=2, territories=("AO",))
    """Angolan kwanza"""

    ARS = CurrencyRecord("ARS", 32, "Argentine peso", symbol="$", exponent=2, territories=("AR",), subunit_symbol="¢")
    """Argentine peso"""

    AUD = CurrencyRecord("AUD", 36, "Australian dollar", symbol="$", exponent=2, territories=("AU", "CX", "CC", "HM", "KI", "NR", "NF", "TV"), subunit_symbol="c")
    """Australian dollar"""

    AWG = CurrencyRecord("AWG", 533, "Aruban florin", symbol="ƒ", exponent=2, territories=("AW",), subunit_symbol="c")
    """Aruban florin"""

    AZN = CurrencyRecord("AZN", 944, "Azerbaijani manat", symbol="₼", exponent=2, territories=("AZ",))
    """Azerbaijani manat"""

    BAM = CurrencyRecord("BAM", 977, "Bosnia and Herzegovina convertible mark", symbol="KM", exponent=2, territories=("BA",))
    """Bosnia and Herzegovina convertible mark"""

    BBD = CurrencyRecord("BBD", 52, "Barbados dollar", symbol="$", exponent=2, territories=("BB",), subunit_symbol="¢")
    """Barbados dollar"""

    BDT = CurrencyRecord("BDT", 50, "Bangladeshi taka", symbol="৳", exponent=2, territories=("BD",))
    """Bangladeshi taka"""

    BGN = CurrencyRecord("BGN", 975, "Bulgarian lev", symbol="лв", exponent=2, territories=("BG",), subunit_symbol="ст")
    """Bulgarian lev"""

    BHD = CurrencyRecord("BHD", 48, "Bahraini dinar", symbol=".د.ب", exponent=3, territories=("BH",))
    """Bahraini dinar"""

    BIF = CurrencyRecord("BIF", 108, "Burundian franc", symbol="FBu", exponent=0, territories=("BI",))
    """Burundian franc"""

    BMD = CurrencyRecord("BMD", 60, "Bermudian dollar", symbol="$", exponent=2, territories=("BM",), subunit_symbol="¢")
    """Bermudian dollar"""

    BND = CurrencyRecord("BND", 96, "Brunei dollar", symbol="$", exponent=2, territories=("BN",))
    """Brunei dollar"""

    BOB = CurrencyRecord("BOB", 68, "Boliviano", symbol="Bs.", exponent=2, territories=("BO",))
    """Boliviano"""

    BOV = CurrencyRecord("BOV", 984, "Bolivian Mvdol", exponent=2, territories=("BO",), is_fund=True)
    """Bolivian Mvdol"""

    BRL = CurrencyRecord("BRL", 986, "Brazilian real", symbol="R$", exponent=2, territories=("BR",))
    """Brazilian real"""

    BSD = CurrencyRecord("BSD", 44, "Bahamian dollar", symbol="$", exponent=2, territories=("BS",), subunit_symbol="¢")
    """Bahamian dollar"""

    BTN = CurrencyRecord("BTN", 64, "Bhutanese ngultrum", symbol="Nu.", exponent=2, territories=("BT",))
    """Bhutanese ngultrum"""

    BWP = CurrencyRecord("BWP", 72, "Botswana pula", symbol="P", exponent=2, territories=("BW",))
    """Botswana pula"""

    BYN = CurrencyRecord("BYN", 933, "Belarusian ruble", symbol="Br", exponent=2, territories=("BY",))
    """Belarusian ruble"""

    BZD = CurrencyRecord("BZD", 84, "Belize dollar", symbol="$", exponent=2, territories=("BZ",), subunit_symbol="¢")
    """Belize dollar"""

    CAD = CurrencyRecord("CAD", 124, "Canadian dollar", symbol="$", exponent=2, territories=("CA",), subunit_symbol="¢")
    """Canadian dollar"""

    CDF = CurrencyRecord("CDF", 976, "Congolese franc", symbol="FC", exponent=2, territories=("CD",))
    """Congolese franc"""

    CHE = CurrencyRecord("CHE", 947, "WIR euro", exponent=2, territories=("CH",), is_fund=True)
    """WIR euro"""

    CHF = CurrencyRecord("CHF", 756, "Swiss franc", symbol="Fr.", exponent=2, territories=("LI", "CH"), subunit_symbol="Rp.")
    """Swiss franc"""

    CHW = CurrencyRecord("CHW", 948, "WIR franc", exponent=2, territories=("CH",), is_fund=True)
    """WIR franc"""

    CLF = CurrencyRecord("CLF", 990, "Unidad de Fomento", exponent=4, territories=("CL",), is_fund=True)
    """Unidad de Fomento"""

    CLP = CurrencyRecord("CLP", 152, "Chilean peso", symbol="$", exponent=0, territories=("CL",))
    """Chilean peso"""

    CNY = CurrencyRecord("CNY", 156, "Renminbi", symbol="¥", exponent=2, territories=("CN",))
    """Renminbi"""

    COP = CurrencyRecord("COP", 170, "Colombian peso", symbol="$", exponent=2, territories=("CO",))
    """Colombian peso"""

    COU = CurrencyRecord("COU", 970, "Unidad de Valor Real", exponent=2, territories=("CO",), is_fund=True)
    """Unidad de Valor Real"""

    CRC = CurrencyRecord("CRC", 188, "Costa Rican colón", symbol="₡", exponent=2, territories=("CR",))
    """Costa Rican colón"""

    CUC = CurrencyRecord("CUC", 931, "Cuban convertible peso", symbol="$", exponent=2, superseded_by="CUP")
    """Cuban convertible peso"""

    CUP = CurrencyRecord("CUP", 192, "Cuban peso", symbol="$", exponent=2, territories=("CU",), subunit_symbol="¢")
    """Cuban peso"""

    CVE = CurrencyRecord("CVE", 132, "Cape Verdean escudo", symbol="$", exponent=2, territories=("CV",))
    """Cape Verdean escudo"""

    CZK = CurrencyRecord("CZK", 203, "Czech koruna", symbol="Kč", exponent=2, territories=("CZ",), subunit_symbol="h")
    """Czech koruna"""

    DJF = CurrencyRecord("DJF", 262, "Djiboutian franc", symbol="Fdj", exponent=0, territories=("DJ",))
    """Djiboutian franc"""

    DKK = CurrencyRecord("DKK", 208, "Danish krone", symbol="kr", exponent=2, territories=("DK", "FO", "GL"), subunit_symbol="øre")
    """Danish krone"""

    DOP = CurrencyRecord("DOP", 214, "Dominican peso", symbol="$", exponent=2, territories=("DO",))
    """Dominican peso"""

    DZD = CurrencyRecord("DZD", 12, "Algerian dinar", symbol="د.ج", exponent=2, territories=("DZ",))
    """Algerian dinar"""

    EGP = CurrencyRecord("EGP", 818, "Egyptian pound", symbol="£", exponent=2, territories=("EG",))
    """Egyptian pound"""

    ERN = CurrencyRecord("ERN", 232, "Eritrean nakfa", symbol="Nfk", exponent=2, territories=("ER",))
    """Eritrean nakfa"""

    ETB = CurrencyRecord("ETB", 230, "Ethiopian birr", symbol="Br", exponent=2, territories=("ET",))
    """Ethiopian birr"""

    EUR = CurrencyRecord("EUR", 978, "Euro", symbol="€", exponent=2, territories=("AD", "AT", "BE", "CY", "EE", "FI", "FR", "DE", "GR", "GP", "HR", "IE", "IT", "XK", "LV", "LT", "LU", "MT", "GF", "MQ", "YT", "MC", "ME", "NL", "PT", "RE", "BL", "PM", "SM", "SK", "SI", "ES", "TF", "VA", "AX", "MF"), subunit_symbol="c")
    """Euro"""

    FJD = CurrencyRecord("FJD", 242, "Fiji dollar", symbol="$", exponent=2, territories=("FJ",), subunit_symbol="¢")
    """Fiji dollar"""

    FKP = CurrencyRecord("FKP", 238, "Falkland Islands pound", symbol="£", exponent=2, territories=("FK",), subunit_symbol="p")
    """Falkland Islands pound"""

    GBP = CurrencyRecord("GBP", 826, "Pound sterling", symbol="£", exponent=2, territories=("GB", "IM", "JE", "GG"), subunit_symbol="p")
    """Pound sterling"""

    GEL = CurrencyRecord("GEL", 981, "Georgian lari", symbol="₾", exponent=2, territories=("GE",))
    """Georgian lari"""

    GHS = CurrencyRecord("GHS", 936, "Ghanaian cedi", symbol="₵", exponent=2, territories=("GH",))
    """Ghanaian cedi"""

    GIP = CurrencyRecord("GIP", 292, "Gibraltar pound", symbol="£", exponent=2, territories=("GI",), subunit_symbol="p")
    """Gibraltar pound"""

    GMD = CurrencyRecord("GMD", 270, "Gambian dalasi", symbol="D", exponent=2, territories=("GM",))
    """Gambian dalasi"""

    GNF = CurrencyRecord("GNF", 324, "Guinean franc", symbol="FG", exponent=0, territories=("GN",))
    """Guinean franc"""

    GTQ = CurrencyRecord("GTQ", 320, "Guatemalan quetzal", symbol="Q", exponent=2, territories=("GT",))
    """Guatemalan quetzal"""

    GYD = CurrencyRecord("GYD", 328, "Guyanese dollar", symbol="$", exponent=2, territories=("GY",))
    """Guyanese dollar"""

    HKD = CurrencyRecord("HKD", 344, "Hong Kong dollar", symbol="$", exponent=2, territories=("HK",))
    """Hong Kong dollar"""

    HNL = CurrencyRecord("HNL", 340, "Honduran lempira", symbol="L", exponent=2, territories=("HN",))
    """Honduran lempira"""

    HRK = CurrencyRecord("HRK", 191, "Croatian kuna", symbol="kn", exponent=2, superseded_by="EUR")
    """Croatian kuna"""

    HTG = CurrencyRecord("HTG", 332, "Haitian gourde", symbol="G", exponent=2, territories=("HT",))
    """Haitian gourde"""

    HUF = CurrencyRecord("HUF", 348, "Hungarian forint", symbol="Ft", exponent=2, territories=("HU",))
    """Hungarian forint"""

    IDR = CurrencyRecord("IDR", 360, "Indonesian rupiah", symbol="Rp", exponent=2, territories=("ID",))
    """Indonesian rupiah"""

    ILS = CurrencyRecord("ILS", 376, "Israeli new shekel", symbol="₪", exponent=2, territories=("IL", "PS"))
    """Israeli new shekel"""

    INR = CurrencyRecord("INR", 356, "Indian rupee", symbol="₹", exponent=2, territories=("IN", "BT"))
    """Indian rupee"""

    IQD = CurrencyRecord("IQD", 368, "Iraqi dinar", symbol="ع.د", exponent=3, territories=("IQ",))
    """Iraqi dinar"""

    IRR = CurrencyRecord("IRR", 364, "Iranian rial", symbol="﷼", exponent=2, territories=("IR",))
    """Iranian rial"""

    ISK = CurrencyRecord("ISK", 352, "Icelandic króna", symbol="kr", exponent=0, territories=("IS",))
    """Icelandic króna"""

    JMD = CurrencyRecord("JMD", 388, "Jamaican dollar", symbol="$", exponent=2, territories=("JM",))
    """Jamaican dollar"""

    JOD = CurrencyRecord("JOD", 400, "Jordanian dinar", symbol="د.ا", exponent=3, territories=("JO",))
    """Jordanian dinar"""

    JPY = CurrencyRecord("JPY", 392, "Japanese yen", symbol="¥", exponent=0, territories=("JP",))
    """Japanese yen"""

    KES = CurrencyRecord("KES", 404, "Kenyan shilling", symbol="Sh", exponent=2, territories=("KE",))
    """Kenyan shilling"""

    KGS = CurrencyRecord("KGS", 417, "Kyrgyzstani som", symbol="с", exponent=2, territories=("KG",))
    """Kyrgyzstani som"""

    KHR = CurrencyRecord("KHR", 116, "Cambodian riel", symbol="៛", exponent=2, territories=("KH",))
    """Cambodian riel"""

    KMF = CurrencyRecord("KMF", 174, "Comoro franc", symbol="CF", exponent=0, territories=("KM",))
    """Comoro franc"""

    KPW = CurrencyRecord("KPW", 408, "North Korean won", symbol="₩", exponent=2, territories=("KP",))
    """North Korean won"""

    KRW = CurrencyRecord("KRW", 410, "South Korean won", symbol="₩", exponent=0, territories=("KR",))
    """South Korean won"""

    KWD = CurrencyRecord("KWD", 414, "Kuwaiti dinar", symbol="د.ك", exponent=3, territories=("KW",))
    """Kuwaiti dinar"""

    KYD = CurrencyRecord("KYD", 136, "Cayman Islands dollar", symbol="$", exponent=2, territories=("KY",), subunit_symbol="¢")
    """Cayman Islands dollar"""

    KZT = CurrencyRecord("KZT", 398, "Kazakhstani tenge", symbol="₸", exponent=2, territories=("KZ",))
    """Kazakhstani tenge"""

    LAK = CurrencyRecord("LAK", 418, "Lao kip", symbol="₭", exponent=2, territories=("LA",))
    """Lao kip"""

    LBP = CurrencyRecord("LBP", 422, "Lebanese pound", symbol="ل.ل", exponent=2, territories=("LB",))
    """Lebanese pound"""

    LKR = CurrencyRecord("LKR", 144, "Sri Lankan rupee", symbol="Rs", exponent=2, territories=("LK",))
    """Sri Lankan rupee"""

    LRD = CurrencyRecord("LRD", 430, "Liberian dollar", symbol="$", exponent=2, territories=("LR",))
    """Liberian dollar"""

    LSL = CurrencyRecord("LSL", 426, "Lesotho loti", symbol="L", exponent=2, territories=("LS",))
    """Lesotho loti"""

    LYD = CurrencyRecord("LYD", 434, "Libyan dinar", symbol="ل.د", exponent=3, territories=("LY",))
    """Libyan dinar"""

    MAD = CurrencyRecord("MAD", 504, "Moroccan dirham", symbol="د.م.", exponent=2, territories=("MA", "EH"))
    """Moroccan dirham"""

    MDL = CurrencyRecord("MDL", 498, "Moldovan leu", symbol="L", exponent=2, territories=("MD",))
    """Moldovan leu"""

    MGA = CurrencyRecord("MGA", 969, "Malagasy ariary", symbol="Ar", exponent=2, territories=("MG",))
    """Malagasy ariary"""

    MKD = CurrencyRecord("MKD", 807, "Macedonian denar", symbol="ден", exponent=2, territories=("MK",))
    """Macedonian denar"""

    MMK = CurrencyRecord("MMK", 104, "Myanmar kyat", symbol="K", exponent=2, territories=("MM",))
    """Myanmar kyat"""

    MNT = CurrencyRecord("MNT", 496, "Mongolian tögrög", symbol="₮", exponent=2, territories=("MN",))
    """Mongolian tögrög"""

    MOP = CurrencyRecord("MOP", 446, "Macanese pataca", symbol="P", exponent=2, territories=("MO",))
    """Macanese pataca"""

    MRU = CurrencyRecord("MRU", 929, "Mauritanian ouguiya", symbol="UM", exponent=2, territories=("MR",))
    """Mauritanian ouguiya"""

    MUR = CurrencyRecord("MUR", 480, "Mauritian rupee", symbol="₨", exponent=2, territories=("MU",))
    """Mauritian rupee"""

    MVR = CurrencyRecord("MVR", 462, "Maldivian rufiyaa", symbol=".ރ", exponent=2, territories=("MV",))
    """Maldivian rufiyaa"""

    MWK = CurrencyRecord("MWK", 454, "Malawian kwacha", symbol="MK", exponent=2, territories=("MW",))
    """Malawian kwacha"""

    MXN = CurrencyRecord("MXN", 484, "Mexican peso", symbol="$", exponent=2, territories=("MX",), subunit_symbol="¢")
    """Mexican peso"""

    MXV = CurrencyRecord("MXV", 979, "Mexican Unidad de Inversion", exponent=2, territories=("MX",), is_fund=True)
    """Mexican Unidad de Inversion"""

    MYR = CurrencyRecord("MYR", 458, "Malaysian ringgit", symbol="RM", exponent=2, territories=("MY",))
    """Malaysian ringgit"""

    MZN = CurrencyRecord("MZN", 943, "Mozambican metical", symbol="MT", exponent=2, territories=("MZ",))
    """Mozambican metical"""

    NAD = CurrencyRecord("NAD", 516, "Namibian dollar", symbol="$", exponent=2, territories=("NA",), subunit_symbol="c")
    """Namibian dollar"""

    NGN = CurrencyRecord("NGN", 566, "Nigerian naira", symbol="₦", exponent=2, territories=("NG",))
    """Nigerian naira"""

    NIO = CurrencyRecord("NIO", 558, "Nicaraguan córdoba", symbol="C$", exponent=2, territories=("NI",))
    """Nicaraguan córdoba"""

    NOK = CurrencyRecord("NOK", 578, "Norwegian krone", symbol="kr", exponent=2, territories=("NO", "SJ", "BV"), subunit_symbol="øre")
    """Norwegian krone"""

    NPR = CurrencyRecord("NPR", 524, "Nepalese rupee", symbol="₨", exponent=2, territories=("NP",))
    """Nepalese rupee"""

    NZD = CurrencyRecord("NZD", 554, "New Zealand dollar", symbol="$", exponent=2, territories=("NZ", "CK", "NU", "PN", "TK"), subunit_symbol="c")
    """New Zealand dollar"""

    OMR = CurrencyRecord("OMR", 512, "Omani rial", symbol="ر.ع.", exponent=3, territories=("OM",))
    """Omani rial"""

    PAB = CurrencyRecord("PAB", 590, "Panamanian balboa", symbol="B/.", exponent=2, territories=("PA",))
    """Panamanian balboa"""

    PEN = CurrencyRecord("PEN", 604, "Peruvian sol", symbol="S/", exponent=2, territories=("PE",))
    """Peruvian sol"""

    PGK = CurrencyRecord("PGK", 598, "Papua New Guinean kina", symbol="K", exponent=2, territories=("PG",))
    """Papua New Guinean kina"""

    PHP = CurrencyRecord("PHP", 608, "Philippine peso", symbol="₱", exponent=2, territories=("PH",))
    """Philippine peso"""

    PKR = CurrencyRecord("PKR", 586, "Pakistani rupee", symbol="₨", exponent=2, territories=("PK",))
    """Pakistani rupee"""

    PLN = CurrencyRecord("PLN", 985, "Polish złoty", symbol="zł", exponent=2, territories=("PL",), subunit_symbol="gr")
    """Polish złoty"""

    PYG = CurrencyRecord("PYG", 600, "Paraguayan guaraní", symbol="₲", exponent=0, territories=("PY",))
    """Paraguayan guaraní"""

    QAR = CurrencyRecord("QAR", 634, "Qatari riyal", symbol="ر.ق", exponent=2, territories=("QA",))
    """Qatari riyal"""

    RON = CurrencyRecord("RON", 946, "Romanian leu", symbol="lei", exponent=2, territories=("RO",), subunit_symbol="bani")
    """Romanian leu"""

    RSD = CurrencyRecord("RSD", 941, "Serbian dinar", symbol="дин.", exponent=2, territories=("RS",))
    """Serbian dinar"""

    RUB = CurrencyRecord("RUB", 643, "Russian ruble", symbol="₽", exponent=2, territories=("RU",), subunit_symbol="коп.")
    """Russian ruble"""

    RWF = CurrencyRecord("RWF", 646, "Rwandan franc", symbol="FRw", exponent=0, territories=("RW",))
    """Rwandan franc"""

    SAR = CurrencyRecord("SAR", 682, "Saudi riyal", symbol="ر.س", exponent=2, territories=("SA",))
    """Saudi riyal"""

    SBD = CurrencyRecord("SBD", 90, "Solomon Islands dollar", symbol="$", exponent=2, territories=("SB",))
    """Solomon Islands dollar"""

    SCR = CurrencyRecord("SCR", 690, "Seychelles rupee", symbol="₨", exponent=2, territories=("SC",))
    """Seychelles rupee"""

    SDG = CurrencyRecord("SDG", 938, "Sudanese pound", symbol="ج.س.", exponent=2, territories=("SD",))
    """Sudanese pound"""

    SEK = CurrencyRecord("SEK", 752, "Swedish krona", symbol="kr", exponent=2, territories=("SE",), subunit_symbol="öre")
    """Swedish krona"""

    SGD = CurrencyRecord("SGD", 702, "Singapore dollar", symbol="$", exponent=2, territories=("SG",))
    """Singapore dollar"""

    SHP = CurrencyRecord("SHP", 654, "Saint Helena pound", symbol="£", exponent=2, territories=("SH",), subunit_symbol="p")
    """Saint Helena pound"""

    SLE = CurrencyRecord("SLE", 925, "Sierra Leonean leone", symbol="Le", exponent=2, territories=("SL",))
    """Sierra Leonean leone"""

    SLL = CurrencyRecord("SLL", 694, "Sierra Leonean leone (1964-2022)", symbol="Le", exponent=2, superseded_by="SLE")
    """Sierra Leonean leone (1964-2022)"""

    SOS = CurrencyRecord("SOS", 706, "Somali shilling", symbol="Sh", exponent=2, territories=("SO",))
    """Somali shilling"""

    SRD = CurrencyRecord("SRD", 968, "Surinamese dollar", symbol="$", exponent=2, territories=("SR",))
    """Surinamese dollar"""

    SSP = CurrencyRecord("SSP", 728, "South Sudanese pound", symbol="£", exponent=2, territories=("SS",))
    """South Sudanese pound"""

    STN = CurrencyRecord("STN", 930, "São Tomé and Príncipe dobra", symbol="Db", exponent=2, territories=("ST",))
    """São Tomé and Príncipe dobra"""

    SVC = CurrencyRecord("SVC", 222, "Salvadoran colón", symbol="₡", exponent=2, territories=("SV",))
    """Salvadoran colón"""

    SYP = CurrencyRecord("SYP", 760, "Syrian pound", symbol="£", exponent=2, territories=("SY",))
    """Syrian pound"""

    SZL = CurrencyRecord("SZL", 748, "Swazi lilangeni", symbol="L", exponent=2, territories=("SZ",))
    """Swazi lilangeni"""

    THB = CurrencyRecord("THB", 764, "Thai baht", symbol="฿", exponent=2, territories=("TH",))
    """Thai baht"""

    TJS = CurrencyRecord("TJS", 972, "Tajikistani somoni", symbol="SM", exponent=2, territories=("TJ",))
    """Tajikistani somoni"""

    TMT = CurrencyRecord("TMT", 934, "Turkmenistan manat", symbol="m", exponent=2, territories=("TM",))
    """Turkmenistan manat"""

    TND = CurrencyRecord("TND", 788, "Tunisian dinar", symbol="د.ت", exponent=3, territories=("TN",))
    """Tunisian dinar"""

    TOP = CurrencyRecord("TOP", 776, "Tongan paʻanga", symbol="T$", exponent=2, territories=("TO",))
    """Tongan paʻanga"""

    TRY = CurrencyRecord("TRY", 949, "Turkish lira", symbol="₺", exponent=2, territories=("TR",), subunit_symbol="kr")
    """Turkish lira"""

    TTD = CurrencyRecord("TTD", 780, "Trinidad and Tobago dollar", symbol="$", exponent=2, territories=("TT",))
    """Trinidad and Tobago dollar"""

    TWD = CurrencyRecord("TWD", 901, "New Taiwan dollar", symbol="$", exponent=2, territories=("TW",))
    """New Taiwan dollar"""

    TZS = CurrencyRecord("TZS", 834, "Tanzanian shilling", symbol="Sh", exponent=2, territories=("TZ",))
    """Tanzanian shilling"""

    UAH = CurrencyRecord("UAH", 980, "Ukrainian hryvnia", symbol="₴", exponent=2, territories=("UA",), subunit_symbol="коп.")
    """Ukrainian hryvnia"""

    UGX = CurrencyRecord("UGX", 800, "Ugandan shilling", symbol="Sh", exponent=0, territories=("UG",))
    """Ugandan shilling"""

    USD = CurrencyRecord("USD", 840, "United States dollar", symbol="$", exponent=2, territories=("US", "AS", "BQ", "IO", "EC", "SV", "GU", "HT", "MH", "FM", "MP", "PW", "PA", "PR", "TL", "TC", "VG", "VI", "UM"), subunit_symbol="¢")
    """United States dollar"""

    USN = CurrencyRecord("USN", 997, "United States dollar (next day)", exponent=2, territories=("US",), is_fund=True)
    """United States dollar (next day)"""

    UYI = CurrencyRecord("UYI", 940, "Uruguay Peso en Unidades Indexadas", exponent=0, territories=("UY",), is_fund=True)
    """Uruguay Peso en Unidades Indexadas"""

    UYU = CurrencyRecord("UYU", 858, "Uruguayan peso", symbol="$", exponent=2, territories=("UY",))
    """Uruguayan peso"""

    UYW = CurrencyRecord("UYW", 927, "Unidad previsional", exponent=4, territories=("UY",))
    """Unidad previsional"""

    UZS = CurrencyRecord("UZS", 860, "Uzbekistan sum", symbol="so'm", exponent=2, territories=("UZ",))
    """Uzbekistan sum"""

    VED = CurrencyRecord("VED", 926, "Venezuelan digital bolívar", symbol="Bs.D", exponent=2, territories=("VE",))
    """Venezuelan digital bolívar"""

    VES = CurrencyRecord("VES", 928, "Venezuelan sovereign bolívar", symbol="Bs.S", exponent=2, territories=("VE",))
    """Venezuelan sovereign bolívar"""

    VND = CurrencyRecord("VND", 704, "Vietnamese đồng", symbol="₫", exponent=0, territories=("VN",))
    """Vietnamese đồng"""

    VUV = CurrencyRecord("VUV", 548, "Vanuatu vatu", symbol="VT", exponent=0, territories=("VU",))
    """Vanuatu vatu"""

    WST = CurrencyRecord("WST", 882, "Samoan tala", symbol="T", exponent=2, territories=("WS",))
    """Samoan tala"""

    XAF = CurrencyRecord("XAF", 950, "Central African CFA franc", symbol="FCFA", exponent=0, territories=("CM", "CF", "CG", "TD", "GQ", "GA"))
    """Central African CFA franc"""

    XAG = CurrencyRecord("XAG", 961, "Silver (one troy ounce)", is_special=True)
    """Silver (one troy ounce)"""

    XAU = CurrencyRecord("XAU", 959, "Gold (one troy ounce)", is_special=True)
    """Gold (one troy ounce)"""

    XBA = CurrencyRecord("XBA", 955, "European Composite Unit", is_special=True)
    """European Composite Unit"""

    XBB = CurrencyRecord("XBB", 956, "European Monetary Unit", is_special=True)
    """European Monetary Unit"""

    XBC = CurrencyRecord("XBC", 957, "European Unit of Account 9", is_special=True)
    """European Unit of Account 9"""

    XBD = CurrencyRecord("XBD", 958, "European Unit of Account 17", is_special=True)
    """European Unit of Account 17"""

    XCD = CurrencyRecord("XCD", 951, "East Caribbean dollar", symbol="$", exponent=2, territories=("AI", "AG", "DM", "GD", "MS", "KN", "LC", "VC"))
    """East Caribbean dollar"""

    XDR = CurrencyRecord("XDR", 960, "Special drawing rights", is_special=True)
    """Special drawing rights"""

    XOF = CurrencyRecord("XOF", 952, "West African CFA franc", symbol="CFA", exponent=0, territories=("BJ", "BF", "CI", "GW", "ML", "NE", "SN", "TG"))
    """West African CFA franc"""

    XPD = CurrencyRecord("XPD", 964, "Palladium (one troy ounce)", is_special=True)
    """Palladium (one troy ounce)"""

    XPF = CurrencyRecord("XPF", 953, "CFP franc", symbol="₣", exponent=0, territories=("PF", "NC", "WF"))
    """CFP franc"""

    XPT = CurrencyRecord("XPT", 962, "Platinum (one troy ounce)", is_special=True)
    """Platinum (one troy ounce)"""

    XSU = CurrencyRecord("XSU", 994, "SUCRE", is_special=True)
    """SUCRE"""

    XTS = CurrencyRecord("XTS", 963, "Code reserved for testing", is_special=True)
    """Code reserved for testing"""

    XUA = CurrencyRecord("XUA", 965, "ADB Unit of Account", is_special=True)
    """ADB Unit of Account"""

    XXX = CurrencyRecord("XXX", 999, "No currency", symbol="¤", is_special=True)
    """No currency"""

    YER = CurrencyRecord("YER", 886, "Yemeni rial", symbol="﷼", exponent=2, territories=("YE",))
    """Yemeni rial"""

    ZAR = CurrencyRecord("ZAR", 710, "South African rand", symbol="R", exponent=2, territories=("ZA", "LS", "NA"), subunit_symbol="c")
    """South African rand"""

    ZMW = CurrencyRecord("ZMW", 967, "Zambian kwacha", symbol="ZK", exponent=2, territories=("ZM",))
    """Zambian kwacha"""

    ZWG = CurrencyRecord("ZWG", 924, "Zimbabwe Gold", symbol="ZiG", exponent=2, territories=("ZW",))
    """Zimbabwe Gold"""

    ZWL = CurrencyRecord("ZWL", 932, "Zimbabwean dollar", symbol="$", exponent=2, superseded_by="ZWG")
    """Zimbabwean dollar"""
