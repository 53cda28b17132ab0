"""Middle East: Gulf states, the Levant, Iraq and Yemen.

Python 3.13+.
"""

from mena.models import Denomination, Region

from ._factory import region

__all__ = ["MIDDLE_EAST"]

DINAR = Denomination.DINAR
RIYAL = Denomination.RIYAL
DIRHAM = Denomination.DIRHAM
POUND = Denomination.POUND
SHEKEL = Denomination.SHEKEL

MIDDLE_EAST: tuple[Region, ...] = (
    region(
        "sa", "966",
        ("Saudi Arabia", "السعودية"),
        ("Kingdom of Saudi Arabia", "المملكة العربية السعودية"),
        ("Riyadh", "الرياض"),
        ("SAR", "Saudi", "سعودي", RIYAL),
    ),
    region(
        "ae", "971",
        ("United Arab Emirates", "الإمارات"),
        ("United Arab Emirates", "الإمارات العربية المتحدة"),
        ("Abu Dhabi", "أبو ظبي"),
        ("AED", "Emirati", "إماراتي", DIRHAM),
    ),
    region(
        "kw", "965",
        ("Kuwait", "الكويت"),
        ("State of Kuwait", "دولة الكويت"),
        ("Kuwait City", "مدينة الكويت"),
        ("KWD", "Kuwaiti", "كويتي", DINAR),
    ),
    region(
        "qa", "974",
        ("Qatar", "قطر"),
        ("State of Qatar", "دولة قطر"),
        ("Doha", "الدوحة"),
        ("QAR", "Qatari", "قطري", RIYAL),
    ),
    region(
        "bh", "973",
        ("Bahrain", "البحرين"),
        ("Kingdom of Bahrain", "مملكة البحرين"),
        ("Manama", "المنامة"),
        ("BHD", "Bahraini", "بحريني", DINAR),
    ),
    region(
        "om", "968",
        ("Oman", "عُمان"),
        ("Sultanate of Oman", "سلطنة عُمان"),
        ("Muscat", "مسقط"),
        ("OMR", "Omani", "عماني", RIYAL),
    ),
    region(
        "jo", "962",
        ("Jordan", "الأردن"),
        ("Hashemite Kingdom of Jordan", "المملكة الأردنية الهاشمية"),
        ("Amman", "عمّان"),
        ("JOD", "Jordanian", "أردني", DINAR),
    ),
    region(
        "lb", "961",
        ("Lebanon", "لبنان"),
        ("Lebanese Republic", "الجمهورية اللبنانية"),
        ("Beirut", "بيروت"),
        ("LBP", "Lebanese", "لبنانية", POUND),
    ),
    region(
        "ps", "970",
        ("Palestine", "فلسطين"),
        ("State of Palestine", "دولة فلسطين"),
        ("Jerusalem", "القدس"),
        ("ILS", "Palestinian", "فلسطيني", SHEKEL),
    ),
    region(
        "iq", "964",
        ("Iraq", "العراق"),
        ("Republic of Iraq", "جمهورية العراق"),
        ("Baghdad", "بغداد"),
        ("IQD", "Iraqi", "عراقي", DINAR),
    ),
    region(
        "sy", "963",
        ("Syria", "سوريا"),
        ("Syrian Arab Republic", "الجمهورية العربية السورية"),
        ("Damascus", "دمشق"),
        ("SYP", "Syrian", "سورية", POUND),
    ),
    region(
        "ye", "967",
        ("Yemen", "اليمن"),
        ("Republic of Yemen", "الجمهورية اليمنية"),
        ("Sana'a", "صنعاء"),
        ("YER", "Yemeni", "يمني", RIYAL),
    ),
)
