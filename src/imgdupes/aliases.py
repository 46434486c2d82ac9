from imgdupes.core.models import ExecutionMode, ScanConfig

EXECUTION_MODE_ALIASES = {
    "parallel": ExecutionMode.PARALLEL,
    "sequential": ExecutionMode.SEQUENTIAL,
}

EXTENSIONS_HELP_TEXT = (
    "Image extensions (space separated) to hash.\n"
    f"Default: {' '.join(ScanConfig.DEFAULT_IMAGE_EXTENSIONS)}"
)

EPILOG_TEXT = """
Examples:
  Basic usage - report identical images in Pictures folder
  %(prog)s ~/Pictures

  Same as above + move redundant copies into a separate folder
  %(prog)s ~/Pictures ~/Pictures-duplicates

  Move redundant copies to trash instead, write the report elsewhere
  %(prog)s ~/Pictures --trash -o ~/report.json

  Hash only PNG and WebP files on a single thread (reproducible order)
  %(prog)s ~/Pictures -x .png .webp --mode sequential
"""
