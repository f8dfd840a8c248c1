from setuptools import setup, find_packages


setup(
    name="rootstock_receipt",
    version="0.0.1",
    author="MedTrebor",
    author_email="medovarski.robert@gmail.com",
    description="Rootstock transaction receipt generator",
    long_description="Fetch transaction receipts from a Rootstock node and "
    "export them as PDF receipts and QR codes.",
    packages=find_packages(include=["blockchain", "core", "export", "utils"]),
    py_modules=["main"],
    python_requires=">=3.10",
    install_requires=[
        "web3>=6.0",
        "eth-utils",
        "eth-typing",
        "hexbytes",
        "aiohttp",
        "rich",
        "pyaml-env",
        "fpdf2>=2.7",
        "qrcode",
        "Pillow>=9.1",
    ],
    extras_require={"test": ["pytest"]},
)
