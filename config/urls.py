from django.contrib import admin
from django.urls import path
from django.conf.urls.i18n import i18n_patterns
from django.views.i18n import set_language


urlpatterns = [
    path("i18n/", set_language, name="set_language"),
]

urlpatterns += i18n_patterns(
    path("admin/", admin.site.urls),
)

admin.site.site_header = "Администрирование меню"
admin.site.site_title = "Меню"
admin.site.index_title = "Панель управления"
