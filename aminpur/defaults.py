# aminpur/defaults.py
# Built-in dataset, used when neither the remote mirror nor the local store has data.
from __future__ import annotations

from .schemas import Category, InfoItem

DEFAULT_CATEGORIES: list[dict] = [
    {"id": "1", "name": "থানা ও প্রশাসন", "description": "পুলিশ ও সরকারি অফিস", "icon": "Building2", "color": "bg-blue-500"},
    {"id": "2", "name": "হাসপাতাল", "description": "সরকারি ও বেসরকারি চিকিৎসা কেন্দ্র", "icon": "Stethoscope", "color": "bg-red-500"},
    {"id": "3", "name": "ডাক্তার", "description": "বিশেষজ্ঞ চিকিৎসকদের চেম্বার", "icon": "UserRound", "color": "bg-emerald-500"},
    {"id": "4", "name": "শিক্ষা প্রতিষ্ঠান", "description": "স্কুল, কলেজ ও মাদ্রাসা", "icon": "GraduationCap", "color": "bg-purple-500"},
    {"id": "5", "name": "পরিবহন", "description": "বাস ও যাতায়াতের সময়সূচি", "icon": "Bus", "color": "bg-orange-500"},
    {"id": "6", "name": "অ্যাম্বুলেন্স", "description": "জরুরি রোগী পরিবহন", "icon": "Truck", "color": "bg-rose-500"},
    {"id": "7", "name": "জরুরি নম্বর", "description": "ফায়ার সার্ভিস ও হটলাইন", "icon": "PhoneCall", "color": "bg-amber-500"},
    {"id": "8", "name": "হাট-বাজার", "description": "বাজার ও দোকানপাট", "icon": "Store", "color": "bg-teal-500"},
]

DEFAULT_ITEMS: list[dict] = [
    {
        "id": "101", "categoryId": "1", "title": "আমিনপুর থানা",
        "address": "আমিনপুর বাজার, বেড়া, পাবনা", "phone": "01320-000000",
        "type": "থানা", "established": "২০১৩",
        "details": "থানা সংক্রান্ত যেকোনো প্রয়োজনে ২৪ ঘণ্টা যোগাযোগ করুন।",
    },
    {
        "id": "201", "categoryId": "2", "title": "বেড়া উপজেলা স্বাস্থ্য কমপ্লেক্স",
        "address": "বেড়া, পাবনা", "phone": "01730-000000",
        "type": "সরকারি", "timing": "২৪ ঘণ্টা জরুরি বিভাগ খোলা",
    },
    {
        "id": "202", "categoryId": "2", "title": "আমিনপুর ডায়াগনস্টিক সেন্টার",
        "address": "আমিনপুর বাজার, কলেজ রোড", "phone": "01711-000000",
        "type": "বেসরকারি", "timing": "সকাল ৮টা - রাত ১০টা",
    },
    {
        "id": "301", "categoryId": "3", "title": "ডা. মো. রফিকুল ইসলাম",
        "address": "আমিনপুর ডায়াগনস্টিক সেন্টার", "phone": "01712-000000",
        "specialty": "মেডিসিন বিশেষজ্ঞ", "timing": "শুক্রবার বিকাল ৩টা - ৭টা",
    },
    {
        "id": "401", "categoryId": "4", "title": "আমিনপুর ডিগ্রি কলেজ",
        "address": "আমিনপুর, বেড়া, পাবনা", "phone": "01715-000000",
        "type": "কলেজ", "established": "১৯৯৫",
    },
    {
        "id": "402", "categoryId": "4", "title": "আমিনপুর উচ্চ বিদ্যালয়",
        "address": "আমিনপুর বাজার সংলগ্ন", "phone": "01716-000000",
        "type": "মাধ্যমিক বিদ্যালয়", "established": "১৯৬৮",
    },
    {
        "id": "501", "categoryId": "5", "title": "আমিনপুর - ঢাকা বাস সার্ভিস",
        "address": "আমিনপুর বাসস্ট্যান্ড", "phone": "01717-000000",
        "route": "আমিনপুর - কাশিনাথপুর - ঢাকা", "timing": "সকাল ৬টা থেকে প্রতি ঘণ্টায়",
    },
    {
        "id": "601", "categoryId": "6", "title": "আমিনপুর অ্যাম্বুলেন্স সার্ভিস",
        "address": "আমিনপুর বাজার", "phone": "01718-000000", "timing": "২৪ ঘণ্টা",
    },
    {
        "id": "701", "categoryId": "7", "title": "জাতীয় জরুরি সেবা",
        "address": "সারা দেশ", "phone": "999",
        "details": "পুলিশ, ফায়ার সার্ভিস ও অ্যাম্বুলেন্সের জন্য বিনামূল্যে কল করুন।",
    },
    {
        "id": "801", "categoryId": "8", "title": "আমিনপুর হাট",
        "address": "আমিনপুর বাজার", "phone": "01719-000000",
        "timing": "শনিবার ও মঙ্গলবার",
    },
]


def default_directory() -> tuple[list[Category], list[InfoItem]]:
    """Fresh model objects, safe to mutate."""
    categories = [Category.model_validate(c) for c in DEFAULT_CATEGORIES]
    items = [InfoItem.model_validate(i) for i in DEFAULT_ITEMS]
    return categories, items
