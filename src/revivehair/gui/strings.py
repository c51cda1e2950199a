"""UI strings for ReviveHair GUI.

Centralizes user-facing text that is not part of the static content module.
"""

from __future__ import annotations

# =============================================================================
# Application
# =============================================================================
APP_TITLE = "ReviveHair"

# =============================================================================
# Navigation
# =============================================================================
NAV_HOME = "Home"
NAV_UPLOAD = "Upload"
NAV_RECOMMENDATIONS = "Advice"
NAV_BACK = "Back"

# =============================================================================
# Splash
# =============================================================================
SPLASH_TITLE = "HAIR LOSS DETECTION\n& PREVENTION SYSTEM"
SPLASH_NOTE = "Note: This app provides predictions\nbased on trained datasets only."

# =============================================================================
# Carousel
# =============================================================================
CAROUSEL_TITLE = "Your Personal\n     AI Dermatologist"

# =============================================================================
# Home
# =============================================================================
HOME_HEADLINE = "Early Detection\nMakes a Difference"
HOME_SCAN_TITLE = "Check Your Scalp"
HOME_SCAN_DESC = "Take a photo or pick one from your gallery"
HOME_FAQ_TITLE = "Hair Care FAQ"
HOME_FAQ_DESC = "Simple habits that help prevent hair fall"
HOME_RECOMMENDATIONS_TITLE = "Recommendations"
HOME_RECOMMENDATIONS_DESC = "Next steps for your hair health"
HOME_UPLOAD = "Upload Image"

# =============================================================================
# Action sheet
# =============================================================================
SHEET_CAMERA = "Camera"
SHEET_GALLERY = "Gallery"
SHEET_CANCEL = "Cancel"

# =============================================================================
# Dialogs
# =============================================================================
DIALOG_CLOSE = "Close"

# =============================================================================
# Upload
# =============================================================================
UPLOAD_TITLE = "Upload Image"
UPLOAD_SELECT = "Select Image from Gallery"
UPLOAD_OR_CAPTURE = "Or Capture Image"
UPLOAD_CAPTURE = "Capture Image"
UPLOAD_SELECTED = "Selected: {name}"
UPLOAD_VIEW_RECOMMENDATIONS = "View Recommendations"

# =============================================================================
# Recommendations
# =============================================================================
RECOMMENDATIONS_TITLE = "Recommendations"

# =============================================================================
# Logging
# =============================================================================
LOG_PICKED_IMAGE = "Picked image from {source}: {path}"
