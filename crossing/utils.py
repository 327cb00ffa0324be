"""Utility functions for the crossing package."""


def format_minutes(minutes: int) -> str:
    """
    Format a duration in minutes as readable text.
    
    Args:
        minutes: Duration in whole minutes
        
    Returns:
        Formatted string with hours split out once the duration reaches an hour
        
    Examples:
        >>> format_minutes(17)
        '17 minutes'
        >>> format_minutes(1)
        '1 minute'
        >>> format_minutes(75)
        '1 hour 15 minutes'
        >>> format_minutes(120)
        '2 hours'
    """
    hours, rest = divmod(minutes, 60)
    
    parts = []
    if hours:
        parts.append(f"{hours} hour" + ("s" if hours != 1 else ""))
    if rest or not hours:
        parts.append(f"{rest} minute" + ("s" if rest != 1 else ""))
    
    return " ".join(parts)
