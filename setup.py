from setuptools import setup, find_packages

setup(
    name='RegistrationAppValidation',
    version='0.1',
    packages=find_packages(include=['registration_engine', 'registration_engine.*', 'flask_app', 'flask_app.*']),
    python_requires='>=3.10',
    install_requires=[
        'Flask',
        'SQLAlchemy>=1.4',
        'psycopg2-binary',
        'python-dotenv'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'run_registration=flask_app.run:main'
        ]
    }
)
