"""User-facing strings of the extension helpers in every supported language."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ExtensionTranslation", "Language", "translate", "translations_for"]


class ExtensionTranslation(IntEnum):
    """Keys of the translatable strings; the value is the index into each table."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2
    UNALIGNED = 3
    POSITION_MANUAL = 4
    POSITION_SCREEN_RELATIVE = 5
    POSITION_WINDOW_RELATIVE = 6
    UNKNOWN = 7
    CORNER_POSITION_TOP_LEFT = 8
    CORNER_POSITION_TOP_RIGHT = 9
    CORNER_POSITION_BOTTOM_LEFT = 10
    CORNER_POSITION_BOTTOM_RIGHT = 11
    SIZING_POLICY_SIZE_TO_CONTENT = 12
    SIZING_POLICY_SIZE_CONTENT_TO_WINDOW = 13
    SIZING_POLICY_MANUAL_WINDOW_SIZE = 14
    KEY_INPUT_POPUP_NAME = 15
    APPLY_BUTTON = 16
    CANCEL_BUTTON = 17
    UPDATE_DESC = 18
    UPDATE_CURRENT_VERSION = 19
    UPDATE_NEW_VERSION = 20
    UPDATE_OPEN_PAGE = 21
    UPDATE_AUTO_BUTTON = 22
    UPDATE_IN_PROGRESS = 23
    UPDATE_RESTART_PENDING = 24
    UPDATE_ERROR = 25
    STYLE = 26
    TITLE_BAR = 27
    BACKGROUND = 28
    SCROLLBAR = 29
    PADDING = 30
    SIZING_POLICY = 31
    APPEAR_AS_IN_OPTION = 32
    TITLE_BAR_TEXT = 33
    SHORTCUT = 34
    POSITION = 35
    FROM_ANCHOR_PANEL_CORNER = 36
    THIS_PANEL_CORNER = 37
    ANCHOR_WINDOW = 38
    COLUMN_SETUP = 39
    SHOW_BASED_ON_MAP = 40
    ALTERNATING_ROW_BG = 41
    HIGHLIGHT_HOVERED_ROW = 42
    MAX_DISPLAYED = 43
    HEADER_ALIGNMENT = 44
    COLUMN_ALIGNMENT = 45
    LANGUAGE = 46
    SETTINGS_SHOW_HEADER_TEXT = 47


class Language(IntEnum):
    """Languages with a translation table; values follow the game's language ids."""

    ENGLISH = 0
    FRENCH = 2
    GERMAN = 3
    SPANISH = 4


_ENGLISH = (
    "Left",
    "Right",
    "Centered",
    "Standard",
    "Manual",
    "Screen Relative",
    "Window Relative",
    "Unknown",
    "Top-Left",
    "Top-Right",
    "Bottom-Left",
    "Bottom-Right",
    "Size to Content",
    "Size Content to Window",
    "Manual Window Size",
    "KeyBind",
    "Apply",
    "Cancel",
    "A new update for the {} is available.",
    "Current version",
    "New Version",
    "Open download page",
    "Update automatically",
    "Autoupdate in progress",
    "Autoupdate finished, restart your game to activate it.",
    "Autoupdate error, please update manually.",
    "Style",
    "Title bar",
    "Background",
    "Scrollbar",
    "Padding",
    "Sizing Policy",
    "Appear as in option",
    "Title bar",
    "Shortcut",
    "Position",
    "From anchor panel corner",
    "This panel corner",
    "Anchor window",
    "Column Setup",
    "Show Columns based on map",
    "Alternating Row Background",
    "Highlight hovered row",
    "max displayed",
    "Header Alignment",
    "Column Alignment",
    "Language",
    "Show header with text instead of images",
)

_GERMAN = (
    "Links",
    "Rechts",
    "Zentriert",
    "Standard",
    "Manuell",
    "Relativ zum Bildschirm",
    "Relativ zu einem anderen Fenster",
    "Unbekannt",
    "Oben-Links",
    "Oben-Rechts",
    "Unten-Links",
    "Unten-Rechts",
    "Passe Fenster an Inhalt an",
    "Passe Inhalt an Fenster an",
    "Manuelle Fenstergröße",
    "Tastenbelegung",
    "Anwenden",
    "Abbrechen",
    "Eine neue Version für das {} ist verfügbar.",
    "Aktuelle Version",
    "Neue Version",
    "Öffne Download Seite",
    "Automatisch Aktualisieren",
    "Aktualisierung im Gange",
    "Aktualisierung beendet, starte das Spiel neu zum Aktivieren.",
    "Aktualisierung fehlgeschlagen, bitte update manuell.",
    "Style",
    "Titelleiste",
    "Hintergrund",
    "Scrollleiste",
    "Padding",
    "Größenregeln",
    "Optionstext",
    "Titelleiste Text",
    "Tastenkürzel",
    "Position",
    "Ecke des anzuheftenden Fensters",
    "Ecke des aktuellen Fensters",
    "Anzuheftendes Fenster",
    "Spalteneinstellung",
    "Zeige Spalten basierend auf der aktuellen Karte.",
    "Abwechselnder Zeilenhintergrund",
    "Markiere die aktuelle Zeile",
    "Maximale Anzahl an Zeilen",
    "Ausrichtung der Kopfzeile",
    "Ausrichtung des Inhalts",
    "Sprache",
    "Zeige Text anstatt von Icons in der Kopfzeile",
)

_FRENCH = (
    "Gauche",
    "Droit",
    "Centré",
    "Standard",
    "Manuel",
    "Écran Relatif",
    "Fenêtre relative",
    "Inconnu",
    "Coin supérieur gauche",
    "Coin supérieur droit",
    "Coin inférieur gauche",
    "Coin inférieur droit",
    "Taille par rapport au contenu",
    "Taille du contenu par rapport à la fenêtre",
    "Taille de la fenêtre manuelle",
    "Lier les touches",
    "Appliquer",
    "Annuler",
    "Une nouvelle mise à jour pour le {} est disponible.",
    "Version actuelle",
    "Nouvelle version",
    "Ouvrir la page de téléchargement",
    "Mise à jour automatique",
    "Mise à jour automatique en cours",
    "La mise à jour automatique est terminée, redémarrez votre jeu pour l'activer.",
    "Erreur de mise à jour automatique, veuillez mettre à jour manuellement.",
    "Style",
    "Barre de titre",
    "Fond d'écran",
    "Barre de défilement",
    "Padding",
    "Règle de dimensionnement",
    "Apparaître comme dans l'option",
    "Barre de titre",
    "Raccourci",
    "Position",
    "Depuis le coin du panneau d'ancrage",
    "Ce coin de panneau",
    "Fenêtre d'ancrage",
    "Configuration des colonnes",
    "Afficher les colonnes en fonction de la carte",
    "Fond à rangs alternés",
    "Mettre en surbrillance la ligne survolée",
    "max affiché",
    "Alignement de l'en-tête",
    "Alignement des colonnes",
    "Langue",
    "Afficher l'en-tête avec du texte au lieu des images",
)

_SPANISH = (
    "Izquierda",
    "Derecha",
    "Centrado",
    "Estándar",
    "Manual",
    "Relativo a la pantalla",
    "Relativo a la ventana",
    "Desconocido",
    "Arriba a la izquierda",
    "Arriba a la derecha",
    "Abajo a la izquierda",
    "Abajo a la derecha",
    "Tamaño al contenido",
    "Tamaño del contenido a la ventana",
    "Tamaño de la ventana de Manuel",
    "Encuadernación de teclas",
    "Aplicar",
    "Cancelar",
    "Está disponible una nueva actualización para el {}.",
    "Versión actual",
    "Nueva versión",
    "Abrir la página de descarga",
    "Actualizar automáticamente",
    "Actualización automática en curso",
    "La actualización automática ha finalizado, reinicia el juego para activarla.",
    "Error de actualización automática, por favor, actualice manualmente.",
    "Estilo",
    "Barra de título",
    "Antecedentes",
    "Barra de desplazamiento",
    "Padding",
    "Política de tallas",
    "Aparecer como en la opción",
    "Barra de título",
    "Atajo",
    "Posición",
    "Desde la esquina del panel de anclaje",
    "Esta esquina del panel",
    "Ventana de anclaje",
    "Configuración de la columna",
    "Mostrar columnas basadas en el mapa",
    "Fondo de filas alternas",
    "Resaltar la fila que se ha desplazado",
    "máximo mostrado",
    "Alineación de la cabecera",
    "Alineación de columnas",
    "Idioma",
    "Mostrar la cabecera con texto en lugar de imágenes",
)

_TABLES: dict[Language, tuple[str, ...]] = {
    Language.ENGLISH: _ENGLISH,
    Language.GERMAN: _GERMAN,
    Language.FRENCH: _FRENCH,
    Language.SPANISH: _SPANISH,
}

for _language, _table in _TABLES.items():
    if len(_table) != len(ExtensionTranslation):
        raise RuntimeError(
            f"translation table for {_language.name} has {len(_table)} entries, "
            f"expected {len(ExtensionTranslation)}"
        )


def translations_for(language: Language | int = Language.ENGLISH) -> tuple[str, ...]:
    """Return the whole table of a language, ordered by ExtensionTranslation."""
    return _TABLES[Language(language)]


def translate(
    key: ExtensionTranslation | int, language: Language | int = Language.ENGLISH
) -> str:
    """Return the string for ``key`` in ``language``.

    Raises ValueError for an unknown key or language.
    """
    return translations_for(language)[ExtensionTranslation(key)]