import pyximport; pyximport.install(language_level=3)   # compiles the .pyx on first import if no built extension exists
