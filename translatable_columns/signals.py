from django.dispatch import Signal

# kwargs: instance, key, locale, old_value, new_value
translation_has_been_set = Signal()
