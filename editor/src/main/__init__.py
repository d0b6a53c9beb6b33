"""Editor behaviour split into mixins composed by CompositionEditor"""
