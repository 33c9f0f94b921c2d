from django.db import models

from translatable_columns import HasColumnTranslations, translation_mutator


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    class Meta:
        abstract = True


class Category(HasColumnTranslations, TimeStampedModel):
    translatable_keys = ["name"]
    translatable_locales = ["ru", "ky", "en"]

    name_ru = models.CharField(max_length=200)
    name_ky = models.CharField(max_length=200, blank=True, default="")
    name_en = models.CharField(max_length=200, blank=True, default="")
    sort_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    def __str__(self):
        return self.name
    class Meta:
        ordering = ("sort_order", "id")
        verbose_name = "Категории"
        verbose_name_plural = "Категории"


class Item(HasColumnTranslations, TimeStampedModel):
    translatable_keys = ["name", "description"]
    translatable_locales = ["ru", "ky", "en"]

    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name="items")

    name_ru = models.CharField(max_length=200)
    name_ky = models.CharField(max_length=200, blank=True, default="")
    name_en = models.CharField(max_length=200, blank=True, default="")

    description_ru = models.TextField(blank=True, default="")
    description_ky = models.TextField(blank=True, default="")
    description_en = models.TextField(blank=True, default="")

    base_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    is_available = models.BooleanField(default=True)

    @translation_mutator("name")
    def strip_name(self, value, locale):
        # из админки и импорта часто прилетают пробелы по краям
        setattr(self, f"name_{locale}", (value or "").strip())

    def __str__(self):
        # чтобы в админке и селектах было видно категорию
        return f"{self.category} — {self.name}"
    class Meta:
        verbose_name = "Блюдо"
        verbose_name_plural = "Блюда"
