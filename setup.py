import setuptools

with open("README.md", "r", encoding="utf-8") as f:
  long_description = f.read()

setuptools.setup(
  name="arrayview",
  version="0.0.1",
  description="Strided array views over buffer-protocol memory",
  long_description=long_description,
  long_description_content_type="text/markdown",
  packages=setuptools.find_packages(include=["arrayview", "arrayview.*"]),
  classifiers=[
      "Programming Language :: Python :: 3",
      "License :: OSI Approved :: MIT License",
  ],
  install_requires=["numpy"],
  python_requires=">=3.8",
  extras_require={
    "linting": ["flake8", "pylint", "mypy", "pre-commit"],
    "testing": ["pytest"],
  }
)
