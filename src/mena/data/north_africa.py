"""North Africa: the Nile Valley and the Maghreb.

Python 3.13+.
"""

from mena.models import Denomination, Region

from ._factory import region

__all__ = ["NORTH_AFRICA"]

DINAR = Denomination.DINAR
DIRHAM = Denomination.DIRHAM
POUND = Denomination.POUND
OUGUIYA = Denomination.OUGUIYA

NORTH_AFRICA: tuple[Region, ...] = (
    region(
        "eg", "20",
        ("Egypt", "مصر"),
        ("Arab Republic of Egypt", "جمهورية مصر العربية"),
        ("Cairo", "القاهرة"),
        ("EGP", "Egyptian", "مصري", POUND),
    ),
    region(
        "sd", "249",
        ("Sudan", "السودان"),
        ("Republic of the Sudan", "جمهورية السودان"),
        ("Khartoum", "الخرطوم"),
        ("SDG", "Sudanese", "سوداني", POUND),
    ),
    region(
        "ly", "218",
        ("Libya", "ليبيا"),
        ("State of Libya", "دولة ليبيا"),
        ("Tripoli", "طرابلس"),
        ("LYD", "Libyan", "ليبي", DINAR),
    ),
    region(
        "tn", "216",
        ("Tunisia", "تونس"),
        ("Republic of Tunisia", "الجمهورية التونسية"),
        ("Tunis", "تونس"),
        ("TND", "Tunisian", "تونسي", DINAR),
    ),
    region(
        "dz", "213",
        ("Algeria", "الجزائر"),
        ("People's Democratic Republic of Algeria", "الجمهورية الجزائرية الديمقراطية الشعبية"),
        ("Algiers", "الجزائر"),
        ("DZD", "Algerian", "جزائري", DINAR),
    ),
    region(
        "ma", "212",
        ("Morocco", "المغرب"),
        ("Kingdom of Morocco", "المملكة المغربية"),
        ("Rabat", "الرباط"),
        ("MAD", "Moroccan", "مغربي", DIRHAM),
    ),
    region(
        "mr", "222",
        ("Mauritania", "موريتانيا"),
        ("Islamic Republic of Mauritania", "الجمهورية الإسلامية الموريتانية"),
        ("Nouakchott", "نواكشوط"),
        ("MRU", "Mauritanian", "موريتانية", OUGUIYA),
    ),
)
