"""
Demo capabilities, implementations and bean wired by config/injector.properties.
"""
