"""
Services that sit around the engine: input intents and tick pacing.
"""
