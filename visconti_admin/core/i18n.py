"""
User-facing text, one table per locale.
The active locale is chosen once at startup from ``settings.LOCALE``.
"""
from functools import lru_cache
import logging

from visconti_admin.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

TEXTS: dict[str, dict[str, str]] = {
    "en": {
        # Shell
        "shell.title": "Visconti Admin",
        "shell.welcome": "Welcome, Admin",
        "nav.dashboard": "Dashboard",
        "nav.menu": "Menu Management",
        "nav.offers": "Offers",
        "nav.settings": "Settings",
        "nav.menu_images": "Menu Images",
        "nav.logout": "Logout",
        # Login
        "login.title": "Admin Login",
        "login.username": "Username",
        "login.password": "Password",
        "login.submit": "Sign in",
        "login.failed": "Login failed",
        # Dashboard
        "dashboard.total_orders": "Total Orders Today",
        "dashboard.revenue": "Revenue Today",
        "dashboard.menu_items": "Menu Items",
        "dashboard.active_orders": "Active Orders",
        "dashboard.coming_soon": "Coming Soon",
        "dashboard.loading": "Loading...",
        # Menu management
        "menu.title": "Menu Management",
        "menu.all_categories": "All Categories",
        "menu.add_item": "Add Item",
        "menu.add_title": "Add Menu Item",
        "menu.edit_title": "Edit Menu Item",
        "menu.name": "Name",
        "menu.name_ph": "Item name",
        "menu.description": "Description",
        "menu.description_ph": "Item description",
        "menu.price": "Price",
        "menu.category": "Category",
        "menu.image": "Image",
        "menu.click_to_upload": "Click to upload",
        "menu.preview": "Preview",
        "menu.submit_add": "Add Item",
        "menu.submit_update": "Update Item",
        "menu.cancel": "Cancel",
        "menu.loading": "Loading menu items...",
        "menu.empty": "No menu items found.",
        "menu.add_first": "Add Your First Item",
        "menu.edit": "Edit",
        "menu.delete": "Delete",
        "menu.previous": "Previous",
        "menu.next": "Next",
        "menu.page_of": "Page {page} of {total}",
        "menu.confirm_delete": "Are you sure you want to delete this item?",
        # Offer badges
        "offers.add_title": "Add New Offer Badge",
        "offers.title_ph": "Title",
        "offers.description_ph": "Description",
        "offers.discount_ph": "Discount %",
        "offers.add": "Add Badge",
        "offers.adding": "Adding...",
        "offers.all": "All Offer Badges",
        "offers.loading": "Loading badges...",
        "offers.empty": "No badges found.",
        "offers.off": "OFF",
        "offers.expires": "Expires: {date}",
        "offers.confirm_delete": "Are you sure you want to delete this badge?",
        # Menu image gallery
        "gallery.title": "Menu Image Management",
        "gallery.subtitle": (
            "Upload and manage images of your physical menu that will be "
            "displayed to customers."
        ),
        "gallery.upload_title": "Upload New Image",
        "gallery.drag_drop": "Drag & drop or click to upload",
        "gallery.select": "Select Image",
        "gallery.remove": "Remove",
        "gallery.upload": "Upload Image",
        "gallery.uploading": "Uploading...",
        "gallery.uploaded": "Uploaded Images ({count})",
        "gallery.uploaded_on": "Uploaded: {date}",
        "gallery.loading": "Loading...",
        "gallery.empty": "No images yet",
        "gallery.empty_hint": "Upload your first image to get started.",
        "gallery.invalid_type": "Please select an image file (JPG, PNG, WEBP)",
        "gallery.invalid_size": "Image must be less than 5MB",
        "gallery.select_first": "Please select an image first",
        "gallery.upload_success": "Image uploaded successfully!",
        "gallery.upload_failed": "Upload failed",
        "gallery.delete_success": "Image deleted successfully!",
        "gallery.delete_failed": "Delete failed",
        "gallery.fetch_failed": "Error fetching images",
        "gallery.confirm_delete": "Are you sure you want to delete this image?",
        # Shared
        "confirm.yes": "Yes, delete",
        "confirm.no": "Cancel",
        "settings.placeholder": "Coming Soon",
        "error.backend": "The backend service could not be reached.",
    },
    "it": {
        "shell.title": "Visconti Admin",
        "shell.welcome": "Benvenuto, Admin",
        "nav.dashboard": "Dashboard",
        "nav.menu": "Gestione Menu",
        "nav.offers": "Offerte",
        "nav.settings": "Impostazioni",
        "nav.menu_images": "Immagini Menu",
        "nav.logout": "Esci",
        "login.title": "Accesso Admin",
        "login.username": "Nome utente",
        "login.password": "Password",
        "login.submit": "Accedi",
        "login.failed": "Accesso non riuscito",
        "dashboard.total_orders": "Ordini Totali Oggi",
        "dashboard.revenue": "Incasso Oggi",
        "dashboard.menu_items": "Piatti nel Menu",
        "dashboard.active_orders": "Ordini Attivi",
        "dashboard.coming_soon": "Prossimamente",
        "dashboard.loading": "Caricamento...",
        "menu.title": "Gestione Menu",
        "menu.all_categories": "Tutte le Categorie",
        "menu.add_item": "Aggiungi Piatto",
        "menu.add_title": "Aggiungi Piatto al Menu",
        "menu.edit_title": "Modifica Piatto",
        "menu.name": "Nome",
        "menu.name_ph": "Nome del piatto",
        "menu.description": "Descrizione",
        "menu.description_ph": "Descrizione del piatto",
        "menu.price": "Prezzo",
        "menu.category": "Categoria",
        "menu.image": "Immagine",
        "menu.click_to_upload": "Clicca per caricare",
        "menu.preview": "Anteprima",
        "menu.submit_add": "Aggiungi Piatto",
        "menu.submit_update": "Aggiorna Piatto",
        "menu.cancel": "Annulla",
        "menu.loading": "Caricamento del menu...",
        "menu.empty": "Nessun piatto trovato.",
        "menu.add_first": "Aggiungi il Primo Piatto",
        "menu.edit": "Modifica",
        "menu.delete": "Elimina",
        "menu.previous": "Precedente",
        "menu.next": "Successiva",
        "menu.page_of": "Pagina {page} di {total}",
        "menu.confirm_delete": "Sei sicuro di voler eliminare questo piatto?",
        "offers.add_title": "Aggiungi Nuova Offerta",
        "offers.title_ph": "Titolo",
        "offers.description_ph": "Descrizione",
        "offers.discount_ph": "Sconto %",
        "offers.add": "Aggiungi Offerta",
        "offers.adding": "Aggiunta in corso...",
        "offers.all": "Tutte le Offerte",
        "offers.loading": "Caricamento offerte...",
        "offers.empty": "Nessuna offerta trovata.",
        "offers.off": "DI SCONTO",
        "offers.expires": "Scade: {date}",
        "offers.confirm_delete": "Sei sicuro di voler eliminare questa offerta?",
        "gallery.title": "Gestione Immagini Menu",
        "gallery.subtitle": (
            "Carica e gestisci le immagini del menu cartaceo mostrate ai clienti."
        ),
        "gallery.upload_title": "Carica Nuova Immagine",
        "gallery.drag_drop": "Trascina o clicca per caricare",
        "gallery.select": "Seleziona Immagine",
        "gallery.remove": "Rimuovi",
        "gallery.upload": "Carica Immagine",
        "gallery.uploading": "Caricamento...",
        "gallery.uploaded": "Immagini Caricate ({count})",
        "gallery.uploaded_on": "Caricata: {date}",
        "gallery.loading": "Caricamento...",
        "gallery.empty": "Nessuna immagine",
        "gallery.empty_hint": "Carica la prima immagine per iniziare.",
        "gallery.invalid_type": "Seleziona un file immagine (JPG, PNG, WEBP)",
        "gallery.invalid_size": "L'immagine deve essere inferiore a 5MB",
        "gallery.select_first": "Seleziona prima un'immagine",
        "gallery.upload_success": "Immagine caricata con successo!",
        "gallery.upload_failed": "Caricamento non riuscito",
        "gallery.delete_success": "Immagine eliminata con successo!",
        "gallery.delete_failed": "Eliminazione non riuscita",
        "gallery.fetch_failed": "Errore nel recupero delle immagini",
        "gallery.confirm_delete": "Sei sicuro di voler eliminare questa immagine?",
        "confirm.yes": "Sì, elimina",
        "confirm.no": "Annulla",
        "settings.placeholder": "Prossimamente",
        "error.backend": "Il servizio backend non è raggiungibile.",
    },
}


class Translator:
    """Look up text for one locale, falling back to English then to the key."""

    def __init__(self, locale: str) -> None:
        if locale not in TEXTS:
            logger.warning("Unknown locale %s, falling back to %s", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self.locale = locale
        self._table = TEXTS[locale]
        self._fallback = TEXTS[DEFAULT_LOCALE]

    def __call__(self, key: str, **kwargs) -> str:
        text = self._table.get(key) or self._fallback.get(key)
        if text is None:
            logger.warning("Missing text key %s", key)
            return key
        return text.format(**kwargs) if kwargs else text


@lru_cache
def get_translator() -> Translator:
    """Return the translator for the configured locale."""
    logger.info("Selecting text table for locale=%s", settings.LOCALE)
    return Translator(settings.LOCALE)
