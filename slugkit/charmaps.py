"""Built-in transliteration tables.

``INITIAL_CHARMAP`` and ``INITIAL_MULTICHARMAP`` are the pristine tables a
registry is seeded with and restored to on ``reset()``. They are never
mutated; registries work on copies.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

INITIAL_MULTICHARMAP: Mapping[str, str] = MappingProxyType({
    '।': '.',
    '‘': "' ",
    "’": " '",
})

# Devanagari. Keys longer than one character are unreachable through the
# single-character lookup but are kept so that reset() restores the table
# exactly.
INITIAL_CHARMAP: Mapping[str, str] = MappingProxyType({
    'अ': 'a',
    'आ': 'aa',
    'इ': 'i',
    'ई': 'ee',
    'उ': 'u',
    'ऊ': 'uu',
    'ए': 'e',
    'ऐ': 'ai',
    'ओ': 'o',
    'औ': 'ou',
    'ऍ': 'ei',
    'ऎ': 'ae',
    'ऑ': 'oi',
    'ऒ': 'oii',
    'अं': 'an',
    'अः': 'aha',
    '्': '',
    'ं': 'n',
    'ः': 'h',
    'ा': 'a',
    'ि': 'i',
    'ी': 'ee',
    'ू': 'oo',
    'ु': 'u',
    'े': 'e',
    'ै': 'ai',
    'ौ': 'au',
    'ो': 'o',

    'क': 'Ka',
    'क्': 'K',
    'का': 'Kaa',
    'कि': 'Ki',
    'कू': 'koo',
    'कु': 'Ku',
    'की': 'Kee',
    'के': 'Ke',
    'कै': 'Kai',
    'को': 'Ko',
    'कौ': 'Kau',
    'कं': 'Kan',
    'कः': 'Kah',
    'ख': 'Kha',
    'ख्': 'kh',
    'खा': 'Khaa',
    'खि': 'Khi',
    'खी': 'Khee',
    'खु': 'Khu',
    'खू': 'Khoo',
    'खे': 'Khe',
    'खै': 'Khai',
    'खो': 'Kho',
    'खौ': 'Khau',
    'खं': 'Khan',
    'खः': 'khah',

    'ग': 'Ga',
    'ग्': 'G',
    'गा': 'Gaa',
    'गि': 'Gi',
    'गी': 'Gee',
    'गु': 'Gu',
    'गू': 'Goo',
    'गे': 'Ge',
    'गै': 'Gai',
    'गो': 'Go',
    'गौ': 'Gau',
    'गं': 'Gan',
    'गः': 'Gah',
    'घ': 'Gha',
    'घ्': 'Gh',
    'घा': 'Ghaa',
    'घि': 'Ghi',
    'घी': 'Ghee',
    'घु': 'Ghu',
    'घू': 'Ghoo',
    'घे': 'Ghe',
    'घै': 'Ghai',
    'घो': 'Gho',
    'घौ': 'Ghau',
    'घं': 'Ghan',
    'घः': 'Ghah',
    'च': 'Cha',
    'चा': 'chaa',
    'च्': 'ch',
    'चि': 'chi',
    'ची': 'chee',
    'चु': 'chu',
    'चू': 'choo',
    'चे': 'che',
    'चै': 'chai',
    'चो': 'cho',
    'चौ': 'chau',
    'चं': 'chau',
    'चः': 'cha',

    'छ': 'Chha',
    'छा': 'Chhaa',
    'छि': 'Chhi',
    'छी': 'Chhee',
    'छु': 'Chhu',
    'छू': 'Chhoo',
    'छे': 'Chhe',
    'छै': 'Chhai',
    'छो': 'Chho',
    'छौ': 'Chhau',
    'छं': 'Chhan',
    'छः': 'Chhah',
    'छ्': 'Chh',
    'ज': 'Ja',
    'ज्': 'J',
    'जा': 'Jaa',
    'जि': 'Ji',
    'जी': 'Jee',
    'जु': 'Ju',
    'जू': 'Joo',
    'जे': 'Je',
    'जै': 'Jai',
    'जो': 'Jo',
    'जौ': 'Jau',
    'जं': 'Jan',
    'जः': 'Jah',
    'झ': 'Jha',
    'झा': 'Jhaa',
    'झ्': 'Jh',
    'झि': 'Jhi',
    'झी': 'Jhee',
    'झु': 'Jhu',
    'झू': 'Jhoo',
    'झे': 'Jhe',
    'झै': 'Jhai',
    'झो': 'Jho',
    'झौ': 'Jhau',
    'झं': 'Jhan',
    'झः': 'Jhah',

    'ट': 'Ta',
    'टा': 'Taa',
    'ट्': 'T',
    'टि': 'Ti',
    'टी': 'Tee',
    'टु': 'Tu',
    'टू': 'Too',
    'टे': 'Te',
    'टै': 'Tai',
    'टं': 'Tan',
    'टः': 'Tah',
    'टो': 'To',
    'टौ': 'Tau',

    'ठ': 'Tha',
    'ठ्': 'Th',
    'ठा': 'Thaa',
    'ठि': 'Thi',
    'ठी': 'Thee',
    'ठु': 'Thu',
    'ठू': 'Thoo',
    'ठे': 'The',
    'ठै': 'Thai',
    'ठो': 'Tho',
    'ठौ': 'Thau',
    'ठं': 'Than',
    'ठः': 'Thah',

    'ड': 'Da',
    'ड्': 'D',
    'डा': 'Daa',
    'डि': 'Di',
    'डी': 'Dee',
    'डु': 'Du',
    'डू': 'Doo',
    'डे': 'De',
    'डै': 'Dai',
    'डो': 'Do',
    'डौ': 'Dau',
    'डं': 'Dan',
    'डः': 'Dah',
    'ढ': 'Dha',
    'ढ्': 'Dh',
    'ढा': 'Dhaa',
    'ढि': 'Dhi',
    'ढी': 'Dhee',
    'ढु': 'Dhu',
    'ढू': 'Dhoo',
    'ढे': 'Dhe',
    'ढै': 'Dhai',
    'ढो': 'Dho',
    'ढौ': 'Dhau',
    'ढं': 'Dhan',
    'ढः': 'Dhah',

    'त': 'Ta',
    'त्': 'T',
    'ता': 'Taa',
    'ती': 'Tee',
    'ति': 'Ti',
    'तु': 'Tu',
    'तू': 'Too',
    'ते': 'Te',
    'तै': 'Tai',
    'तो': 'To',
    'तौ': 'Tau',
    'तं': 'Tan',
    'तः': 'Tah',

    'थ': 'Tha',
    'थ्': 'Th',
    'था': 'Thaa',
    'थि': 'Thi',
    'थी': 'Thee',
    'थु': 'Thu',
    'थू': 'Thoo',
    'थे': 'The',
    'थै': 'Thai',
    'थो': 'Tho',
    'थौ': 'Thau',
    'थं': 'Than',
    'थः': 'Thah',

    'द': 'Da',
    'द्': 'd',
    'दा': 'Daa',
    'दि': 'Di',
    'दी': 'Dee',
    'दु': 'Du',
    'दू': 'Doo',
    'दे': 'De',
    'दै': 'Dai',
    'दो': 'Do',
    'दौ': 'Dau',
    'दं': 'Dan',
    'दः': 'Dah',

    'ध': 'Dha',
    'ध्': 'Dh',
    'धा': 'Dhaa',
    'धि': 'Dhi',
    'धी': 'Dhee',
    'धु': 'Dhu',
    'धू': 'Dhoo',
    'धे': 'Dhe',
    'धै': 'Dhai',
    'धो': 'Dho',
    'धौ': 'Dhau',
    'धं': 'Dhan',
    'धः': 'Dhah',

    'न': 'Na',
    'न्': 'Na',
    'ना': 'Naa',
    'नि': 'Ni',
    'नी': 'Nee',
    'नु': 'Nu',
    'नू': 'Noo',
    'ने': 'Ne',
    'नै': 'Nai',
    'नो': 'No',
    'नौ': 'Nau',
    'नं': 'Nan',
    'नः': 'Nah',

    'प': 'Pa',
    'प्': 'P',
    'पा': 'Paa',
    'पि': 'Pi',
    'पी': 'Pee',
    'पु': 'Pu',
    'पू': 'Poo',
    'पे': 'Pe',
    'पै': 'Pai',
    'पो': 'Po',
    'पौ': 'Pau',
    'पं': 'Pan',
    'पः': 'Pah',

    'फ': 'Fa',
    'फ्': 'F',
    'फा': 'Faa',
    'फी': 'Fee',
    'फि': 'Fi',
    'फु': 'Fu',
    'फू': 'Foo',
    'फे': 'Fe',
    'फै': 'Fai',
    'फो': 'Fo',
    'फौ': 'Fau',
    'फं': 'Fan',
    'फः': 'Fah',

    'ब': 'Ba',
    'ब्': 'B',
    'बा': 'Baa',
    'बि': 'Bi',
    'बी': 'Bee',
    'बु': 'Bu',
    'बू': 'Boo',
    'बे': 'Be',
    'बै': 'Bai',
    'बो': 'Bo',
    'बौ': 'Bau',
    'बं': 'Ban',
    'बः': 'Bah',
    'भ': 'Bha',
    'भ्': 'Bh',
    'भा': 'Bhaa',
    'भि': 'Bhi',
    'भी': 'Bhee',
    'भु': 'Bhu',
    'भू': 'Bhoo',
    'भे': 'Bhe',
    'भै': 'Bhai',
    'भो': 'Bho',
    'भौ': 'Bhau',
    'भं': 'Bhan',
    'भः': 'Bhah',
    'म': 'Ma',
    'म्': 'M',
    'मा': 'Maa',
    'मि': 'Mi',
    'मी': 'Mee',
    'मु': 'Mu',
    'मू': 'Moo',
    'मे': 'Me',
    'मै': 'Mai',
    'मो': 'Mo',
    'मौ': 'Mau',
    'मं': 'Man',
    'मः': 'Mah',

    'य': 'Ya',
    'य्': 'Y',
    'या': 'Yaa',
    'यि': 'Yi',
    'यी': 'Yee',
    'यु': 'Yu',
    'यू': 'Yoo',
    'ये': 'Ye',
    'यै': 'Yai',
    'यो': 'Yo',
    'यौ': 'Yau',
    'यं': 'Yan',
    'यः': 'Yah',

    'र': 'Ra',
    'र्': 'R',
    'रा': 'Raa',
    'रि': 'Ri',
    'री': 'Ree',
    'रु': 'Ru',
    'रू': 'Roo',
    'रे': 'Re',
    'रै': 'Rai',
    'रो': 'Ro',
    'रौ': 'Rau',
    'रं': 'Ran',
    'रः': 'Rah',

    'ल': 'La',
    'ल्': 'L',
    'ला': 'Laa',
    'लि': 'Li',
    'ली': 'Lee',
    'लु': 'Lu',
    'लू': 'Loo',
    'ले': 'Le',
    'लै': 'Lai',
    'लो': 'Lo',
    'लौ': 'Lau',
    'लं': 'Lan',
    'लः': 'Lah',

    'व': 'Va',
    'व्': 'V',
    'वा': 'Vaa',
    'वि': 'Vi',
    'वी': 'Vee',
    'वु': 'Vu',
    'वू': 'Voo',
    'वे': 'Ve',
    'वै': 'Vai',
    'वो': 'Vo',
    'वौ': 'Vau',
    'वं': 'Van',
    'वः': 'Vah',

    'स': 'Sa',
    'स्': 'S',
    'सा': 'Saa',
    'सि': 'Si',
    'सी': 'See',
    'सु': 'Su',
    'सू': 'Soo',
    'से': 'Se',
    'सै': 'Sai',
    'सो': 'So',
    'सौ': 'Sau',
    'सं': 'San',
    'सः': 'Sah',
    'श': 'Sha',
    'श्': 'Sh',
    'शा': 'Shaa',
    'शि': 'Shi',
    'शी': 'Shee',
    'शु': 'Shu',
    'शू': 'Shoo',
    'शे': 'She',
    'शै': 'Shai',
    'शो': 'Sho',
    'शौ': 'Shau',
    'शं': 'Shan',
    'शः': 'Shah',

    'ष': 'Shha',
    'ष्': 'Shh',
    'षा': 'Shhaa',
    'षि': 'Shhi',
    'षी': 'Shhee',
    'षु': 'Shhu',
    'षू': 'Shhoo',
    'षे': 'Shhe',
    'षै': 'Shhai',
    'षो': 'Shho',
    'षौ': 'Shhau',
    'षं': 'Shhan',
    'षः': 'Shhah',
    'ह': 'Ha',
    'ह्': 'H',
    'हा': 'Haa',
    'हि': 'Hi',
    'ही': 'Hee',
    'हु': 'Hu',
    'हू': 'Hoo',
    'हे': 'He',
    'है': 'Hai',
    'हो': 'Ho',
    'हौ': 'Hau',
    'हं': 'Han',
    'हः': 'Hah',
    'क्ष': 'Ksha',
    'त्र': 'Tra',
    'ज्ञ': 'Gya',
    'ळ': 'Li',
    'ऌ': 'Li',
    'ऴ': 'Lii',
    'ॡ': 'Lii',
    'ङ': 'Na',
    'ञ': 'Nia',
    'ण': 'Nae',
    'ऩ': 'Ni',
    'ॐ': 'oms',
    'क़': 'Qi',
    'ऋ': 'Ri',
    'ॠ': 'Ri',
    'ऱ': 'Ri',
    'ड़': 'ugDha',
    'ढ़': 'ugDhha',
    'य़': 'Yi',
    'ज़': 'Za',
    'फ़': 'Fi',
    'ग़': 'Ghi',
})

LOCALES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    # Bulgarian, streamlined system (eki.ee/wgrs/rom1_bg.pdf)
    "bg": MappingProxyType({
        "Й": "Y",
        "й": "y",
        "X": "H",
        "x": "h",
        "Ц": "Ts",
        "ц": "ts",
        "Щ": "Sht",
        "щ": "sht",
        "Ъ": "A",
        "ъ": "a",
        "Ь": "Y",
        "ь": "y",
    }),
    "de": MappingProxyType({
        "Ä": "AE",
        "ä": "ae",
        "Ö": "OE",
        "ö": "oe",
        "Ü": "UE",
        "ü": "ue",
    }),
    "sr": MappingProxyType({
        "đ": "dj",
        "Đ": "DJ",
    }),
    # Ukrainian, national system (gov.uk romanization of Ukrainian)
    "uk": MappingProxyType({
        "И": "Y",
        "и": "y",
        "Й": "Y",
        "й": "y",
        "Ц": "Ts",
        "ц": "ts",
        "Х": "Kh",
        "х": "kh",
        "Щ": "Shch",
        "щ": "shch",
        "Г": "H",
        "г": "h",
    }),
})
