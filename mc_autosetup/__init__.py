"""
mc_autosetup package
--------------------
Provisions a local Minecraft server installation: environment checks,
workspace creation, version resolution against the Mojang catalog,
Vanilla/Fabric loader installation, optional MCDReforged layer, config
patching, launch scripts and a supervised first boot.
"""

__version__ = "0.3.0"
