from rest_framework import serializers

from apps.catalog.models import Category, Product


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ("id", "name")


class ProductSerializer(serializers.ModelSerializer):
    category = CategorySummarySerializer(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "name",
            "price",
            "category",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields
