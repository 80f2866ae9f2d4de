"""
Smoke Test Suite - Basic Builder Flows

End-to-end checks of the typical ways a test suite uses Mockli:
1. Single extension: chain, build, keep chaining
2. Merged extensions sharing one mapping
3. Collisions between merged extensions
4. Fixture files combined with chained calls

These tests are meant to catch major regressions in the public API.
"""

import pytest

from mockli import MockBuilder, FixtureMock, MergeCollisionError, merge_all, entity
from tests.factories import UserMock, ProductMock, OrderMock


class TestSmokeBasicFlows:
    """Smoke tests for basic builder flows"""

    def test_single_extension_flow(self):
        """Test the documented UserMock example"""
        assert UserMock().with_user('123').build() == {'users': {'123': {'id': '123'}}}

    def test_storefront_fixture_flow(self, tmp_path):
        """Test building a storefront fixture from a file plus chained calls"""
        fixture_file = tmp_path / 'storefront.yaml'
        fixture_file.write_text(
            "users:\n"
            "  alice:\n"
            "    email: alice@example.com\n",
            encoding='utf-8'
        )

        mock = (merge_all([FixtureMock, UserMock, ProductMock, OrderMock])
                .with_fixture(str(fixture_file))
                .with_user('bob')
                .with_order('o-1', [1, 2], {'customer': 'alice'}))

        assert mock.build() == {
            'users': {
                'alice': {'id': 'alice', 'email': 'alice@example.com'},
                'bob': {'id': 'bob'}
            },
            'orders': {
                'o-1': {'id': 'o-1', 'items': [1, 2], 'status': 'pending', 'customer': 'alice'}
            }
        }

    def test_merge_order_decides_winner(self):
        """Test that swapping merge order swaps the colliding definition"""
        product_last = merge_all([OrderMock, ProductMock]).with_product(1).build()
        order_last = merge_all([ProductMock, OrderMock]).with_product(1).build()

        assert product_last == {'products': {1: {'id': 1, 'name': 'Product 1'}}}
        assert order_last == {'catalog_refs': {1: {'id': 1}}}

    def test_strict_merge_flow(self):
        """Test opting into collision reporting"""
        with pytest.raises(MergeCollisionError):
            merge_all([ProductMock, OrderMock], strict=True)

    def test_inline_extension_flow(self):
        """Test declaring an extension inline in a test"""
        class InvoiceMock(MockBuilder):
            with_invoice = entity('invoices', key_field='number', defaults=lambda n: {'total': 0})

        data = InvoiceMock().with_invoice('INV-1', total=42).with_invoice('INV-2').build()

        assert data == {'invoices': {
            'INV-1': {'number': 'INV-1', 'total': 42},
            'INV-2': {'number': 'INV-2', 'total': 0}
        }}
