"""Tests for the placeholder component."""

from tdd_scaffold.generator.stub import container_test_id, render_component_stub


class TestComponentStub:
    def test_container_test_id(self):
        assert container_test_id("LoginForm") == "loginform-container"

    def test_stub_contents(self):
        stub = render_component_stub("LoginForm")
        assert '<div data-testid="loginform-container">' in stub
        assert "<h2>LoginForm Component</h2>" in stub
        assert '<script setup lang="ts">' in stub
        assert "// const props = defineProps<{}>()" in stub
        assert "<style scoped>" in stub
