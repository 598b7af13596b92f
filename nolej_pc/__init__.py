"""
Nolej Page Component - embed an activity generated by Nolej in a content page
"""
