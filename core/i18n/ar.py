# الرسائل العربية

translations = {
    # الطول
    "length_too_short": "استخدم {min_length} أحرف على الأقل.",
    "length_too_long": "لا تتجاوز {max_length} حرفاً.",

    # التنوع
    "variety_low": "أضف أنواعاً أخرى من الأحرف: {missing}.",
    "class_lower": "أحرف صغيرة",
    "class_upper": "أحرف كبيرة",
    "class_digit": "أرقام",
    "class_symbol": "رموز",

    # العشوائية
    "entropy_low": "اجعل كلمة المرور أطول أو أقل قابلية للتوقع.",

    # الأنماط
    "pattern_repeats": "تجنّب تكرار الحرف نفسه (مثل 'aaa').",
    "pattern_sequence": "تجنّب التسلسلات مثل 'abc' أو '321'.",
    "pattern_keyboard": "تجنّب أنماط لوحة المفاتيح مثل 'qwe' أو 'asd'.",

    # القاموس / القائمة السوداء
    "common_password": "كلمة المرور هذه شائعة الاستخدام.",
    "blacklisted": "تجنّب المعلومات الشخصية والكلمات الممنوعة.",
}
