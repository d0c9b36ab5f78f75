"""
Test Data Factories

Fixture factories for the test-suite, declared with factory_kit.Factory.
They double as worked examples of attributes, options, sequences, uuids and
after callbacks used together.
"""
