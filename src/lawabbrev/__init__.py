"""
lawabbrev: 法令本文から法令名の略称定義を抽出するパッケージ
"""

__version__ = "0.1.0"
