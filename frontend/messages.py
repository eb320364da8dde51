from config.settings import settings

MESSAGES = {
    "en": {
        "title": "🎬 Photo to Video",
        "intro": "📸 Upload a photo and let AI turn it into a short video",
        "intro_prompt": "You can describe how things should move in the video",
        "upload_label": "Click or drag an image here",
        "preview": "Image preview:",
        "prompt_label": "Motion description (optional):",
        "prompt_placeholder": "e.g. the camera slowly pans right, zooms out, cinematic push forward",
        "generate": "🎥 Generate video",
        "generating": "⏳ Generating...",
        "result": "✅ Your video is ready:",
        "download": "💾 Download video",
        "reset": "🔄 Start over",
        "select_image_only": "Please select an image file only",
        "select_image_first": "Please select an image first",
        "processing": "Generating video... this may take a few minutes",
        "success": "Video generated successfully!",
        "generation_failed": "Video generation failed",
        "server_error": "Error communicating with the server",
    },
    "fa": {
        "title": "🎬 ساخت ویدیو از عکس",
        "intro": "📸 عکس خود را آپلود کنید و با هوش مصنوعی آن را به ویدیو تبدیل کنید",
        "intro_prompt": "می‌توانید توضیحات اضافی برای نحوه حرکت در ویدیو بنویسید",
        "upload_label": "کلیک کنید یا عکس را اینجا بکشید",
        "preview": "پیش‌نمایش تصویر:",
        "prompt_label": "توضیحات حرکت (اختیاری):",
        "prompt_placeholder": "مثال: دوربین آهسته به سمت راست حرکت کند، zoom out شود، حرکت سینمایی به جلو",
        "generate": "🎥 ساخت ویدیو",
        "generating": "⏳ در حال ساخت...",
        "result": "✅ ویدیوی شما آماده است:",
        "download": "💾 دانلود ویدیو",
        "reset": "🔄 شروع مجدد",
        "select_image_only": "لطفاً فقط فایل تصویری انتخاب کنید",
        "select_image_first": "لطفاً ابتدا یک تصویر انتخاب کنید",
        "processing": "در حال ساخت ویدیو... این ممکن است چند دقیقه طول بکشد",
        "success": "ویدیو با موفقیت ساخته شد!",
        "generation_failed": "خطا در ساخت ویدیو",
        "server_error": "خطا در ارتباط با سرور",
    },
}


def t(key: str, lang: str | None = None) -> str:
    """Look up a UI string in `lang` (default settings.UI_LANG), falling back to English."""
    table = MESSAGES.get(lang or settings.UI_LANG, MESSAGES["en"])
    return table.get(key, MESSAGES["en"][key])
