from django.contrib import admin

from .models import Category, Item


# ---------- Inlines

class ItemInline(admin.TabularInline):
    model = Item
    extra = 0
    fields = ("name_ru", "name_ky", "name_en", "base_price", "is_available")
    show_change_link = True


# ---------- Admin

class TranslatedNameMixin:
    @admin.display(description="Название")
    def name_display(self, obj):
        # name по активному языку админки, с fallback
        return obj.name

    @admin.display(description="Переводы")
    def locales_display(self, obj):
        return ", ".join(obj.get_translations("name")) or "—"


@admin.register(Category)
class CategoryAdmin(TranslatedNameMixin, admin.ModelAdmin):
    list_display = ("id", "name_display", "locales_display", "sort_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name_ru", "name_ky", "name_en")
    inlines = (ItemInline,)


@admin.register(Item)
class ItemAdmin(TranslatedNameMixin, admin.ModelAdmin):
    list_display = ("id", "name_display", "locales_display", "category", "base_price", "is_available")
    list_filter = ("category", "is_available")
    search_fields = ("name_ru", "name_ky", "name_en")
